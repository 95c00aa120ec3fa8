from flask import jsonify
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
import logging

from localrot.exceptions import LocalRotError
from localrot.api.middlewares.correlation_id import get_correlation_id

logger = logging.getLogger(__name__)


def error_response(error: str, message: str, status_code: int, **extra):
    body = {
        'error': error,
        'message': message,
        'status_code': status_code
    }
    body.update(extra)
    return jsonify(body), status_code


def register_error_handlers(app):
    """Register application error handlers"""

    @app.errorhandler(404)
    def not_found(error):
        return error_response('Not Found', 'Route not found', 404)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"[{get_correlation_id()}] Internal server error: {error}")
        return error_response('Internal Server Error', 'An unexpected error occurred', 500)

    @app.errorhandler(LocalRotError)
    def domain_error(error):
        return error_response(error.error, error.message, error.status_code)

    @app.errorhandler(ValidationError)
    def validation_error(error):
        return error_response(
            'Validation Error',
            'Request data validation failed',
            400,
            details=error.messages
        )

    @app.errorhandler(HTTPException)
    def http_exception(error):
        return error_response(error.name, error.description, error.code)

    @app.errorhandler(Exception)
    def unhandled_exception(error):
        logger.error(f"[{get_correlation_id()}] Unhandled exception: {error}", exc_info=True)
        return error_response('Internal Server Error', 'An unexpected error occurred', 500)
