from __future__ import annotations

from flask import jsonify

from ..core.exceptions import ConflictError, InvalidTimeRange, NotFoundError, ValidationError
from .logging import get_logger

logger = get_logger("http")

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (InvalidTimeRange, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def error_response(exc: Exception):
    """Translate a service exception into a JSON error response."""
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return jsonify({"success": False, "message": str(exc)}), status

    logger.exception("unhandled error", exc_info=exc)
    return jsonify({"success": False, "message": "Internal server error"}), 500
