import datetime as dt

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.movie_store import MovieStore
from app.store import get_store

FROZEN_TODAY = dt.date(2025, 6, 1)


@pytest.fixture
def store():
    return MovieStore.seeded(clock=lambda: FROZEN_TODAY)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
