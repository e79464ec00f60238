"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, reqbot.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reqbot.api.deps.dependencies import get_service_cache
from reqbot.configs import get_settings
from reqbot.observability import configure_logging
from reqbot.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    chat_router,
    diagrams_router,
    health_router,
    reports_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging()
    logger = logging.getLogger(__name__)

    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.handoff_store
    _ = cache.flows
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="ReqBot API",
        description="Conversational requirements elicitation and report generation",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware; the last added runs first
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(reports_router, prefix="/api/v1")
    app.include_router(diagrams_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "reqbot.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
