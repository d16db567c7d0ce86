"""FastAPI application factory and the AppState dependency."""

from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from tigerfive import __version__
from tigerfive.config import Settings, load_settings
from tigerfive.state import AppState

logger = logging.getLogger(__name__)

# Guards the first-request build of app.state.app_state
_state_lock = threading.Lock()


def get_app_state(request: Request) -> AppState:
    """Dependency to get the owned application state.

    The state is built once per app from the settings given to
    ``create_app``, on first use.

    Returns:
        AppState, rehydrated from the configured byte store.
    """
    app = request.app
    state = app.state.app_state
    if state is not None:
        return state
    with _state_lock:
        state = app.state.app_state
        if state is None:
            state = AppState.initialize(app.state.settings)
            app.state.app_state = state
    return state


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    with _state_lock:
        state = app.state.app_state
        app.state.app_state = None
    if state is not None:
        logger.info("Draining remote mirror before exit")
        state.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings; read from the environment by default.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="Tiger Five Golf Tracker API",
        description="Post-round Tiger Five mistake logging and trend analytics",
        version=__version__,
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.app_state = None

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from tigerfive.api.routes import analytics, mirror, preferences, rounds

    app.include_router(rounds.router, prefix="/api")
    app.include_router(analytics.router, prefix="/api")
    app.include_router(mirror.router, prefix="/api")
    app.include_router(preferences.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
