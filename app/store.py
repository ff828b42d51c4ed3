"""Store construction and the FastAPI dependency that hands it to routes."""

from __future__ import annotations

from fastapi import Request

from app.core.config import Settings
from app.services.movie_store import MovieStore


def build_store(settings: Settings) -> MovieStore:
    """Create the process-owned store, seeded unless disabled in settings."""

    if settings.seed_movies:
        return MovieStore.seeded()
    return MovieStore()


def get_store(request: Request) -> MovieStore:
    """FastAPI-friendly dependency returning the app's store."""

    return request.app.state.store
