"""
Application factory for the Locked API.

create_app() builds a FastAPI instance from a Settings object, so tests can
construct isolated apps (see tests/conftest.py) while uvicorn serves the
module-level `app` built from the environment.

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    app = create_app()  # settings from get_settings()
    test_app = create_app(settings=Settings(environment="test", _env_file=None))
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOCAL_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
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

    _configure_logging(settings)
    _init_sentry(settings)

    app = FastAPI(
        title="Locked API",
        description="Posts, follows, feed, profiles and workouts for the Locked app",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _include_routers(app)
    _log_backends(settings)

    return app


def _configure_logging(settings: Settings) -> None:
    """Send application logs to stderr at the configured level."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(settings.log_level)


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if not settings.sentry_dsn:
        return
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1,
        profiles_sample_rate=0.1,
    )
    logger.info(f"Sentry initialized for locked-api ({settings.environment})")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the local web clients plus CORS_ALLOWED_ORIGINS."""
    origins = LOCAL_ORIGINS + [o for o in settings.cors_origins if o not in LOCAL_ORIGINS]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Mount every router; prefixes are declared by the routers themselves."""
    from api.routers import (
        feed_router,
        follows_router,
        health_router,
        photos_router,
        posts_router,
        users_router,
        workouts_router,
    )

    for router in (
        health_router,
        posts_router,
        feed_router,
        follows_router,
        users_router,
        workouts_router,
        photos_router,
    ):
        app.include_router(router)


def _log_backends(settings: Settings) -> None:
    """Log which backends are configured at startup."""
    if settings.use_in_memory_store:
        logger.warning("=== USE_IN_MEMORY_STORE ACTIVE: data is not persisted ===")
    elif not settings.firestore_project_id:
        logger.warning("FIRESTORE_PROJECT_ID not set; data endpoints will return 503")

    if not (settings.supabase_url and settings.supabase_key):
        logger.info("Supabase credentials not set; photo uploads will return 503")


# uvicorn backend.main:app --reload
app = create_app()
