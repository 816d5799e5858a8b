from flask import current_app, jsonify
from app.domain.exceptions import DomainError


def register_error_handlers(app):
    @app.errorhandler(DomainError)
    def handle_domain_error(error):
        current_app.logger.info(
            "%s: %s", type(error).__name__, error
        )
        response = jsonify({
            "error": type(error).__name__,
            "message": str(error)
        })
        response.status_code = error.status_code
        return response
