from flask import Blueprint, jsonify, current_app
from pymongo.errors import PyMongoError
from hammer.extensions import get_services

misc_bp = Blueprint('misc', __name__)


@misc_bp.route("/health")
def health_check():
    services = get_services()
    try:
        services.database.ping()
        db_status = "OK"
    except (PyMongoError, RuntimeError) as e:
        db_status = f"Error: {str(e)}"

    payments_configured = bool(current_app.config.get("KEY_ID") and current_app.config.get("KEY_SECRET"))

    return jsonify({
        "status": "healthy",
        "database": db_status,
        "payments_configured": payments_configured,
    })
