"""Error boundary middleware: last line of defence for unhandled exceptions"""
import logging
from collections.abc import Callable

from fastapi import Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal server error."}


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Convert any exception escaping the rest of the pipeline into a JSON 500.

    Must be registered last so it wraps every other middleware. The failure
    ends the request only; the process keeps serving.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(f"Exception: {e}")
            return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)
