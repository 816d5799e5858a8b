from flask import current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        current_app.logger.error("Health check could not reach the database: %s", exc)
        database = "unavailable"

    status_code = 200 if database == "ok" else 503
    return jsonify({
        "status": "ok" if status_code == 200 else "degraded",
        "service": "content-blocks",
        "database": database,
    }), status_code
