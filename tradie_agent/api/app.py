"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradie_agent.api.middleware.error_handler import ErrorHandlerMiddleware
from tradie_agent.api.middleware.logging import LoggingMiddleware
from tradie_agent.api.routes import commands, health, jobs, profile, quotes
from tradie_agent.application.services.assistant import JobAssistant
from tradie_agent.config.logging import get_logger
from tradie_agent.config.settings import settings

logger = get_logger(__name__)


def create_app(assistant: Optional[JobAssistant] = None) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup", environment=settings.ENVIRONMENT)
        try:
            yield
        finally:
            # Timer tasks must not outlive the event loop
            app.state.assistant.close()
            logger.info("Application shutdown")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Voice command engine for tradie job tracking and quoting",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if settings.DEBUG else None,
        docs_url=f"{settings.API_PREFIX}/docs" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.assistant = assistant or JobAssistant()

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    # Add routes
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(commands.router, prefix=settings.API_PREFIX)
    app.include_router(jobs.router, prefix=settings.API_PREFIX)
    app.include_router(profile.router, prefix=settings.API_PREFIX)
    app.include_router(quotes.router, prefix=settings.API_PREFIX)

    return app
