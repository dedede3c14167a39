"""Request logging middleware."""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from randomuser_proxy.logging import get_logger

REQUEST_ID_HEADER = "x-request-id"

_logger = get_logger("request")


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each HTTP request with timing and a correlation id.

    The id is taken from the ``x-request-id`` header when the caller sends
    one, stored on ``request.state.request_id`` and echoed on the response.
    """

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        _logger.info(
            "request.start id=%s method=%s path=%s client=%s",
            request_id,
            request.method,
            request.url.path,
            request.client.host if request.client else "-",
        )
        try:
            response = await call_next(request)
        except Exception:
            _logger.exception(
                "request.error id=%s method=%s path=%s duration_ms=%d",
                request_id,
                request.method,
                request.url.path,
                _elapsed_ms(start),
            )
            raise

        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        _logger.log(
            level,
            "request.complete id=%s method=%s path=%s status=%s duration_ms=%d",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            _elapsed_ms(start),
        )
        return response
