"""
Request middleware: correlation id assignment and access logging.
"""

import time
import structlog
from typing import Callable
from fastapi import FastAPI, Request, Response
from asgi_correlation_id import CorrelationIdMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its outcome and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        log = logger.bind(method=request.method, path=request.url.path)

        log.debug(
            "Request started",
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
        except Exception:
            log.exception("Request failed", process_time_ms=_elapsed_ms(started))
            raise

        log.info(
            "Request completed",
            status_code=response.status_code,
            process_time_ms=_elapsed_ms(started),
        )
        return response


def setup_middleware(app: FastAPI) -> None:
    """Install request middleware. Starlette runs the last one added first."""
    app.add_middleware(RequestLoggingMiddleware)

    # Outermost, so the request id exists before anything logs
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )
