"""DRF exception handler producing the standard error body.

Every error response, domain or framework, has the same shape::

    {"timestamp": "<ISO-8601>", "status": <int>, "error": "<message>"}

Domain errors are dispatched on ``exc.kind``: input and business-rule
violations become 400, missing records 404.  Anything DRF already knows
how to render keeps DRF's status code.  Unexpected exceptions are logged
and rendered as 500 without leaking internals.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from modules.customers.exceptions import CustomerError, ErrorKind

logger = structlog.get_logger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_CPF: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ILLEGAL_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DOMAIN: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def error_body(status_code: int, message: str) -> dict[str, Any]:
    return {
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "error": message,
    }


def _response_message(data: Any) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    if isinstance(data, dict) and data:
        field, messages = next(iter(data.items()))
        first = messages[0] if isinstance(messages, list) and messages else messages
        return f"{field}: {first}"
    if isinstance(data, list) and data:
        return str(data[0])
    return str(data)


def domain_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    if isinstance(exc, CustomerError):
        status_code = STATUS_BY_KIND[exc.kind]
        logger.info("request.domain_error", kind=str(exc.kind), status_code=status_code)
        set_rollback()
        return Response(error_body(status_code, exc.message), status=status_code)

    if isinstance(exc, PydanticValidationError):
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first['msg']}" if location else first["msg"]
        return Response(
            error_body(status.HTTP_400_BAD_REQUEST, message),
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        response.data = error_body(response.status_code, _response_message(response.data))
        return response

    logger.exception("unhandled_exception", exc_type=type(exc).__name__)
    set_rollback()
    return Response(
        error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
