from flask import Blueprint, jsonify, redirect, url_for

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    return redirect(url_for('snap_solve.index'))

@main_bp.route('/health')
def health():
    return jsonify({'status': 'ok'})
