"""Uniform error envelope for API responses.

Every error leaves the API as ``{"error": "<summary>"}``, optionally with
``"errors"`` (field -> messages) for invalid input or ``"message"`` (the
underlying cause) for internal failures.

``api_exception_handler`` is registered as DRF's ``EXCEPTION_HANDLER`` so
framework-raised errors (malformed JSON, missing credentials, unsupported
methods) use the same shape as the errors the views build themselves.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

INVALID_INPUT = "Invalid input"


def error_response(
    error: str,
    status_code: int,
    *,
    errors: Optional[Dict[str, List[str]]] = None,
    message: Optional[str] = None,
) -> Response:
    """Build an error ``Response`` using the shared envelope."""
    body: Dict[str, Any] = {"error": error}
    if errors is not None:
        body["errors"] = errors
    if message is not None:
        body["message"] = message
    return Response(body, status=status_code)


def invalid_input_response(errors: Dict[str, List[str]]) -> Response:
    return error_response(
        INVALID_INPUT, status.HTTP_400_BAD_REQUEST, errors=errors
    )


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Reshape DRF's default error payloads into the shared envelope.

    Returns ``None`` for exceptions DRF does not handle, which lets them
    propagate as server errors.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and "detail" in data:
        response.data = {"error": str(data["detail"])}
    elif isinstance(data, dict):
        response.data = {
            "error": INVALID_INPUT,
            "errors": {key: _as_messages(value) for key, value in data.items()},
        }
    else:
        response.data = {
            "error": INVALID_INPUT,
            "errors": {"non_field_errors": _as_messages(data)},
        }

    logger.info(
        "api.error",
        status_code=response.status_code,
        exception=type(exc).__name__,
    )
    return response


def _as_messages(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]
