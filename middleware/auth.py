"""Bearer token authentication middleware"""
import logging
from collections.abc import Callable

from fastapi import Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from core.auth import TokenVerifier, extract_bearer_token

logger = logging.getLogger(__name__)


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """
    Require an `Authorization: Bearer <token>` header on every request.

    Fails closed with 401 "Unauthorized" (plain text) when the header is
    missing, uses another scheme, or carries a token the verifier rejects.
    Rejected requests never reach downstream middleware or handlers.
    """

    def __init__(self, app, verifier: TokenVerifier) -> None:
        """
        Initialize middleware with a token verifier.

        Args:
            app: ASGI application
            verifier: Decides whether a presented token grants access
        """
        super().__init__(app)
        self.verifier = verifier

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # First value only when the header is repeated
        token = extract_bearer_token(request.headers.get("Authorization"))

        if token is None or not self.verifier.verify(token):
            logger.warning(
                f"Rejected unauthenticated request: {request.method} {request.url.path}"
            )
            return PlainTextResponse("Unauthorized", status_code=401)

        return await call_next(request)
