from flask import Flask
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import logging

from app.projects.snap_solve.core.evaluator import Evaluator
from app.projects.snap_solve.core.extractor import Extractor
from app.projects.snap_solve.core.model_client import GeminiModelClient
from app.projects.snap_solve.core.pipeline import SnapSolvePipeline

load_dotenv()

csrf = CSRFProtect()


def build_pipeline(config) -> SnapSolvePipeline:
    """Construct the extraction/evaluation pipeline from app config."""
    client = GeminiModelClient(
        api_key=config['GOOGLE_API_KEY'],
        model=config['SNAP_SOLVE_MODEL'],
        timeout_seconds=config['SNAP_SOLVE_TIMEOUT_SECONDS'],
    )
    return SnapSolvePipeline(Extractor(client), Evaluator())


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)

    # Validate required settings
    required_vars = ['SECRET_KEY', 'GOOGLE_API_KEY']
    for var in required_vars:
        if not app.config.get(var):
            raise ValueError(f"Required environment variable {var} is not set")

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize extensions
    csrf.init_app(app)
    app.extensions['snap_solve'] = build_pipeline(app.config)

    # Register blueprints
    from app.routes.main import main_bp
    from app.projects.snap_solve.routes import snap_solve_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(snap_solve_bp)  # Has its own url_prefix defined

    # Register CLI commands
    from app.projects.snap_solve import commands as snap_solve_commands
    snap_solve_commands.init_app(app)

    return app
