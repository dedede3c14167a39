"""Global exception handlers.

Request validation errors become 400 responses with field-level details.
Anything else that escapes a route becomes a generic 500 and is logged with
its traceback; internal details never reach the client.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from randomuser_proxy.logging import get_logger
from randomuser_proxy.schemas import ErrorBody
from randomuser_proxy.validation import field_errors

_logger = get_logger("errors")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = field_errors(exc.errors(), strip_prefix="body")
        _logger.warning(
            "validation failed path=%s fields=%s",
            request.url.path,
            ",".join(detail.field for detail in details),
        )
        body = ErrorBody(error="Validation failed", details=details)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        _logger.error("unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        body = ErrorBody(error="Internal server error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(exclude_none=True),
        )
