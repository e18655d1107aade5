"""Shared fixtures: a fresh store per test and HTTP clients."""

import pytest
from fastapi.testclient import TestClient

from book_store_api.app.core.config import Settings
from book_store_api.app.core.store import reset_store
from book_store_api.app.main import create_app


@pytest.fixture(autouse=True)
def store():
    """Empty the process-wide store before every test."""
    return reset_store()


@pytest.fixture
def client():
    with TestClient(create_app(Settings(strict_status_codes=False))) as c:
        yield c


@pytest.fixture
def strict_client():
    with TestClient(create_app(Settings(strict_status_codes=True))) as c:
        yield c


@pytest.fixture
def book(client):
    """A created book payload (``{_id, title}``)."""
    return client.post("/api/books", json={"title": "Moby Dick"}).json()
