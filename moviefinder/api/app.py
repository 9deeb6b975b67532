"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from moviefinder.api.routes.health import router as health_router
from moviefinder.api.routes.movies import router as movies_router
from moviefinder.autocomplete.index import MovieIndex
from moviefinder.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, index: MovieIndex | None = None) -> FastAPI:
    """
    Build and return a fully wired FastAPI application.

    Loads the title index from ``settings.data_file`` unless a prebuilt
    *index* is passed in. A missing data file leaves the index empty.
    """
    settings = settings or get_settings()

    if index is None:
        if settings.data_file.exists():
            index = MovieIndex.from_file(settings.data_file, settings.index)
        else:
            logger.warning("Title file %s not found, serving an empty index", settings.data_file)
            index = MovieIndex(settings.index)

    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="Type-ahead search over movie titles",
    )

    # Shared state, read by routes through request.app.state in routes
    app.state.settings = settings
    app.state.index = index

    app.include_router(health_router)
    app.include_router(movies_router)

    return app
