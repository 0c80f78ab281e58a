"""
Shared fixtures: every test gets its own app and store.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from main import create_app
from posts.repository import PostStore, build_store


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment settings out of the tests."""
    for name in ("DEPLOYMENT_ID", "BLOG_SEED_POSTS", "BLOG_HOME_PAGE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store() -> PostStore:
    """Store holding the two seed posts."""
    return build_store()


@pytest.fixture
def app(store: PostStore) -> FastAPI:
    return create_app(store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
