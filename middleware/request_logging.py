"""Request/response logging middleware"""
import logging
import time
from collections.abc import Callable

from fastapi import Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path and final status code once the response is ready."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        method = request.method
        path = request.url.path
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"HTTP {method} {path} responded {response.status_code}")
        logger.debug(f"HTTP {method} {path} processed in {process_time_ms:.2f}ms")

        return response
