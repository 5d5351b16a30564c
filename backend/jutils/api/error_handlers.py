"""Error Handlers — map every failure of a JUtils route to one JSON error envelope.

Envelope: {"error": {"code", "message", "category", "severity", "path", ...}}

Invariants:
    - Helpers never raise on bad text, so the common failure is a rejected request body/path/query
    - Rejected request → 400 VALIDATION_ERROR, one detail per offending input,
      each split into location (body / path / query) and field ("text", "operation", ...)
    - RenderError (JUtilsError) → its own status and code, plus the request path
    - Anything else → 500 INTERNAL_ERROR, message never includes exception text
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from jutils.core.errors import ErrorCategory, ErrorSeverity, JUtilsError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install the JUtilsError, validation and catch-all handlers on ``app``."""
    app.add_exception_handler(JUtilsError, _handle_jutils_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


async def _handle_jutils_error(request: Request, exc: JUtilsError):
    logger.error(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "operation": exc.context.operation,
        },
    )
    body = exc.to_response()
    body["error"]["path"] = request.url.path
    return JSONResponse(status_code=exc.http_status, content=body)


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    details = [_describe_input_error(e) for e in exc.errors()]
    logger.warning(
        f"Rejected request: {', '.join(d['location'] + '.' + d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR",
            "Request rejected: check the listed inputs",
            ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR,
            request.url.path,
            details=details,
        ),
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR",
            "An unexpected error occurred",
            ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL,
            request.url.path,
        ),
    )


def _describe_input_error(error: dict) -> dict:
    """("body", "text") -> location "body", field "text"; a bare body has field ""."""
    loc = [str(part) for part in error["loc"]]
    return {
        "location": loc[0] if loc else "",
        "field": ".".join(loc[1:]),
        "message": error["msg"],
        "type": error["type"],
    }


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    path: str,
    details: list[dict] | None = None,
) -> dict:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
        "path": path,
    }
    if details is not None:
        error["details"] = details
    return {"error": error}
