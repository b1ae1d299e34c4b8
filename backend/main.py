"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Split Tracker API",
        description="Training splits, workout logging and week-over-week progress",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _include_routers(app)

    logger.info(f"Split Tracker API created (environment={settings.environment})")
    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for split-tracker-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = DEFAULT_CORS_ORIGINS + settings.cors_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        account_router,
        health_router,
        splits_router,
        workout_history_router,
        workouts_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(workout_history_router)
    app.include_router(splits_router)
    app.include_router(workouts_router)
    app.include_router(account_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
