import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from api import items
from core.auth import StaticTokenVerifier
from core.config import Settings, get_settings
from core.logging import setup_logging
from middleware.auth import BearerAuthMiddleware
from middleware.error_handling import ErrorHandlingMiddleware
from middleware.request_logging import RequestLoggingMiddleware
from services.item_store import ItemStore

logger = logging.getLogger(__name__)

GREETING = "Hello, ASP.NET Core Middleware!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for application initialization and cleanup"""
    setup_logging(app.state.settings)
    logger.info(f"Starting {app.title} {app.version}")

    yield

    # Items live in process memory only; nothing to flush
    logger.info(f"Shutting down {app.title} with {len(app.state.item_store)} item(s)")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its middleware pipeline and routes"""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.item_store = ItemStore()

    # Middleware (order matters - applied in reverse)
    # 3. Request logging (innermost, sees the handler's final status)
    app.add_middleware(RequestLoggingMiddleware)

    # 2. Bearer token authentication
    app.add_middleware(
        BearerAuthMiddleware, verifier=StaticTokenVerifier(settings.api_token)
    )

    # 1. Error boundary (outermost)
    app.add_middleware(ErrorHandlingMiddleware)

    # Routers
    app.include_router(items.router, prefix="/items", tags=["items"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return GREETING

    return app


app = create_app()


def run():
    """Serve the application with uvicorn"""
    settings = get_settings()
    uvicorn.run("main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
