"""Exception handlers translating failures into JSON error responses.

Every error body has the shape ``{"error": {"kind": ..., "message": ...}}``:
- ``UpstreamFailure`` answers with its kind's status code
- request validation errors answer 400
- anything else answers 500 without internal details
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..exceptions import UpstreamFailure
from ..observability import get_logger

logger = get_logger("employee_gateway.api.errors")


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on ``app``."""
    _register_upstream_failure_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def error_body(kind: str, message: str) -> dict[str, dict[str, str]]:
    return {"error": {"kind": kind, "message": message}}


def _register_upstream_failure_handler(app: FastAPI) -> None:
    @app.exception_handler(UpstreamFailure)
    async def upstream_failure_handler(request: Request, exc: UpstreamFailure) -> JSONResponse:
        logger.warning(
            "Upstream failure on %s %s: kind=%s message=%s",
            request.method,
            request.url.path,
            exc.kind.value,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=error_body(exc.kind.value, exc.message),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
        logger.warning("Validation error on %s: %s", request.url.path, fields)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("validation", f"Invalid request data: {', '.join(fields)}"),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("internal", "An unexpected error occurred."),
        )
