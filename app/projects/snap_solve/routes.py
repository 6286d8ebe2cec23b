"""
Snap & Solve - photograph an arithmetic expression, get the answer.
Gemini transcribes the image; the expression is evaluated locally.
"""

import logging

from flask import Blueprint, current_app, jsonify, render_template, request

from app.projects.snap_solve.core.constants import MAX_EXPRESSION_LENGTH
from app.projects.snap_solve.core.payload import ImagePayload
from app.projects.snap_solve.forms import ImageUploadForm

logger = logging.getLogger(__name__)

snap_solve_bp = Blueprint(
    "snap_solve",
    __name__,
    template_folder="templates",
    url_prefix="/snap-solve",
)


def _pipeline():
    return current_app.extensions["snap_solve"]


@snap_solve_bp.route("/")
def index():
    """Upload page."""
    return render_template("snap_solve/index.html")


@snap_solve_bp.route("/api/solve", methods=["POST"])
async def api_solve():
    """Extract and evaluate the expression in an uploaded image. Returns the solve outcome."""
    form = ImageUploadForm(meta={"csrf": False})
    if not form.validate():
        errors = form.image.errors or ["Invalid upload"]
        return jsonify({"error": errors[0]}), 400

    payload = ImagePayload.from_upload(form.image.data)
    logger.info(f"Solving uploaded image ({payload.mime_type})")
    outcome = await _pipeline().solve(payload)
    return jsonify(outcome.to_dict()), 200


@snap_solve_bp.route("/api/evaluate", methods=["POST"])
async def api_evaluate():
    """Evaluate a user-edited expression. Returns the solve outcome."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    expression = data.get("expression")
    if not isinstance(expression, str) or not expression.strip():
        return jsonify({"error": "Expression is required"}), 400
    if len(expression) > MAX_EXPRESSION_LENGTH:
        return jsonify({"error": f"Expression must be {MAX_EXPRESSION_LENGTH} characters or less"}), 400

    outcome = await _pipeline().recalculate(expression)
    return jsonify(outcome.to_dict()), 200


@snap_solve_bp.app_errorhandler(413)
def upload_too_large(e):
    return jsonify({"error": "Image is too large"}), 413
