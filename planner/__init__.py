"""Net Worth Planner Flask Application Factory."""

import logging
from typing import Optional

from flask import Flask

from planner.config import Settings, get_global_settings


def configure_logging(log_level: str) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(log_level)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Settings to use instead of the global environment settings

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    if settings is None:
        settings = get_global_settings()
    configure_logging(settings.log_level)

    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = settings.flask_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["TESTING"] = settings.app_env == "testing"
    app.config["PLANNER_SETTINGS"] = settings

    # Register blueprints
    from planner.blueprints.health import health_bp
    from planner.blueprints.projection import projection_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(projection_bp)

    return app
