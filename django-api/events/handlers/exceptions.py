"""Project-wide DRF exception handler.

Renders every failure in the ``{"errors": [{"code", "description"}]}``
envelope. Request-shape problems become 400 ``malformed_request``;
anything unexpected becomes a generic 500 with details kept in the log.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.handlers.error_catalog import ErrorMessage
from events.handlers.serializers import ErrorResponseSerializer

logger = logging.getLogger(__name__)

MALFORMED_REQUEST = "malformed_request"
INTERNAL_ERROR = ErrorMessage("internal_error", "An unexpected error occurred")

_PASSTHROUGH_HEADERS = ("WWW-Authenticate", "Retry-After")
_UNLABELLED_KEYS = ("detail", "non_field_errors")


def _flatten(detail, prefix: str = "") -> list[str]:
    """Turn DRF's nested error detail into ``"field: message"`` strings."""
    if isinstance(detail, dict):
        messages = []
        for key, value in detail.items():
            label = "" if key in _UNLABELLED_KEYS else (f"{prefix}.{key}" if prefix else str(key))
            messages.extend(_flatten(value, label or prefix))
        return messages
    if isinstance(detail, list):
        return [message for item in detail for message in _flatten(item, prefix)]
    return [f"{prefix}: {detail}" if prefix else str(detail)]


def error_response(messages: list[ErrorMessage], status_code: int, headers=None) -> Response:
    body = ErrorResponseSerializer({"errors": messages}).data
    return Response(body, status=status_code, headers=headers)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s", type(view).__name__ if view else "view", exc_info=exc
        )
        return error_response([INTERNAL_ERROR], status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, (exceptions.ValidationError, exceptions.ParseError)):
        code = MALFORMED_REQUEST
        status_code = status.HTTP_400_BAD_REQUEST
        logger.debug("Malformed request: %s", response.data)
    else:
        code = getattr(exc, "default_code", "error")
        status_code = response.status_code

    messages = [ErrorMessage(code, text) for text in _flatten(response.data)]
    headers = {name: response[name] for name in _PASSTHROUGH_HEADERS if response.has_header(name)}
    return error_response(messages, status_code, headers=headers)
