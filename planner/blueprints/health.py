"""Health check blueprint."""

from flask import Blueprint, Response, current_app, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/healthz")
def health_check() -> Response:
    """Health check endpoint.

    Returns:
        JSON response with status and environment
    """
    settings = current_app.config["PLANNER_SETTINGS"]
    return jsonify({"status": "ok", "environment": settings.app_env})
