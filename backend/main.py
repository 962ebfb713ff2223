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
import os
from contextlib import asynccontextmanager
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


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

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="Training Coach API",
        description="Guided workout sessions with resumable exercise and rest timers",
        version="1.0.0",
        lifespan=_lifespan,
    )

    _configure_cors(app)
    _include_routers(app)
    _log_configuration(settings)

    return app


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Stop every live countdown and write pending records on shutdown."""
    yield
    from api.deps import get_session_registry
    from infrastructure import WriteBehindSessionStore

    # Resolve through overrides so tests shut down the registry they injected
    provider = app.dependency_overrides.get(get_session_registry, get_session_registry)
    registry = provider()
    registry.close_all()

    store = registry.store
    if isinstance(store, WriteBehindSessionStore):
        pending = len(store.pending_keys())
        await run_in_threadpool(store.flush)
        if pending:
            logger.info(f"Wrote {pending} pending session record(s) on shutdown")


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
        )
        logger.info("Sentry initialized for training-coach-api")


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    # Add production domains from environment if configured
    production_origins = os.environ.get("CORS_ALLOWED_ORIGINS", "").split(",")
    trusted_origins.extend([origin.strip() for origin in production_origins if origin.strip()])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import health_router, plans_router, sessions_router

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    app.include_router(plans_router)
    app.include_router(sessions_router)


def _log_configuration(settings: Settings) -> None:
    """Log the session configuration at startup."""
    logger.info(
        f"Session store backend: {settings.session_store_backend} "
        f"(environment={settings.environment})"
    )
    if settings.timer_interval_seconds != 1.0:
        logger.warning(
            f"Timer interval is {settings.timer_interval_seconds}s, not 1s"
        )


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
