"""Shared fixtures: an application with an empty store and its test client."""

import pytest
from fastapi.testclient import TestClient

from posts_board.app.core.config import Settings
from posts_board.app.main import create_app


@pytest.fixture
def app():
    return create_app(Settings(seed_posts=False))


@pytest.fixture
def store(app):
    return app.state.post_store


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_post():
    return {"username": "alice", "content": "hello"}
