"""
JSON envelope shared by every module's routes.

    {"success": true, "data": ..., "message": "..."}
    {"success": false, "error": "...", "errors": {"field": "..."}}

Extra keyword arguments become top-level keys, e.g. the reservation
failure code and field, or the blocked dates of a booking conflict.
"""

from flask import jsonify
from typing import Any


def _envelope(success: bool, status: int, fields: dict) -> tuple:
    body = {'success': success}
    body.update({key: value for key, value in fields.items() if value is not None})
    return jsonify(body), status


def api_success(
    data: Any = None,
    message: str | None = None,
    warning: str | None = None,
    status: int = 200,
    **extra_fields: Any
) -> tuple:
    """
    Successful response.

    Args:
        data: Payload under 'data' (omitted when None)
        message: Confirmation shown to the user
        warning: Non-blocking notice
        status: HTTP status (201 for created records)

    Returns:
        Tuple of (Response, status_code)
    """
    fields = {'data': data, 'message': message or None, 'warning': warning or None}
    fields.update(extra_fields)
    return _envelope(True, status, fields)


def api_error(error: str, status: int = 400, **extra_fields: Any) -> tuple:
    """
    Failed response with a user-facing message.

    Args:
        error: Message under 'error'
        status: 400 validation, 404 not found, 409 conflict or state
        **extra_fields: e.g. errors={field: message}, code, field

    Returns:
        Tuple of (Response, status_code)
    """
    fields = {'error': error}
    fields.update(extra_fields)
    return _envelope(False, status, fields)


def form_errors(form) -> dict:
    """First error message of each invalid form field."""
    return {name: messages[0] for name, messages in form.errors.items() if messages}
