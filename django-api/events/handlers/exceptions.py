"""Error responses shared by every API view.

All failures leave the API as ``{"success": false, "error": {"code", "message"}}``
plus an ``errors`` list for validation failures.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode, StoreFailureError

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AUTHENTICATION_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.AUTHORIZATION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REGISTRATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_REGISTRATION: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_CODE_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_FAILED.value,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.AUTHENTICATION_REQUIRED.value,
    status.HTTP_403_FORBIDDEN: ErrorCode.AUTHORIZATION_DENIED.value,
}


def error_body(code: str, message: str, errors=None) -> dict:
    body = {"success": False, "error": {"code": code, "message": message}}
    if errors:
        body["errors"] = list(errors)
    return body


def error_response(exc: DomainError) -> Response:
    """Translate a domain error into a response without leaking internals."""
    if exc.code is ErrorCode.STORE_FAILURE:
        logger.error("store failure: %s", getattr(exc, "detail", ""), exc_info=exc)
    return Response(
        error_body(exc.code.value, exc.message, getattr(exc, "errors", None)),
        status=_STATUS_BY_CODE[exc.code],
    )


def api_exception_handler(exc, context):
    """DRF ``EXCEPTION_HANDLER``: nothing escapes as an HTML error page."""
    if isinstance(exc, DomainError):
        return error_response(exc)

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        if detail is None and isinstance(exc, exceptions.APIException):
            detail = exc.default_detail
        message = str(detail) if detail else "Request failed"
        default_code = getattr(exc, "default_code", "request_failed")
        code = _CODE_BY_STATUS.get(response.status_code, str(default_code).upper())
        response.data = error_body(code, message)
        return response

    view = context.get("view")
    failure = StoreFailureError(f"{type(view).__name__}: {type(exc).__name__}: {exc}")
    failure.__cause__ = exc
    return error_response(failure)
