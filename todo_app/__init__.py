"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production).

Every application instance owns exactly one in-memory TaskBoard,
stored in ``app.extensions["task_board"]``. Nothing is persisted:
restarting the process starts from an empty list.
"""

import logging
from flask import Flask, current_app

from config import get_config
from todo_app.dispatcher import TaskBoard

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def get_board() -> TaskBoard:
    """Return the TaskBoard bound to the current application."""
    return current_app.extensions["task_board"]


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    log_level = str(app.config["LOG_LEVEL"]).upper()
    try:
        logging.getLogger(__name__).setLevel(log_level)
    except ValueError:
        raise ValueError(
            f"LOG_LEVEL must be a logging level name, got {app.config['LOG_LEVEL']!r}"
        ) from None
    logger.info(f"Creating app with config: {config_class.__name__}")

    app.extensions["task_board"] = TaskBoard.from_config(app.config)

    # Register blueprints
    from todo_app.routes.api import api_bp
    from todo_app.routes.views import views_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(views_bp)

    return app
