"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures logging, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.api.account import router as account_router
from src.api.errors import register_exception_handlers
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "account",
        "description": "Account Registration API - Validate and register user accounts",
    },
]


def configure_logging(level: str) -> None:
    """Configure root logging for the application process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    The application holds no external resources; startup and
    shutdown are only logged.
    """
    logger.info("Starting application...")
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """Build the application from current settings."""
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=settings.app_name,
        description="Account Registration API - Validated account registration endpoint",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    register_exception_handlers(application)

    # Include account routes
    application.include_router(account_router, prefix=f"{settings.api_prefix}/account")

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns 200 OK while the application is serving requests.
        """
        return {"status": "healthy"}

    return application


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        app="src.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
