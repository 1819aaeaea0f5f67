"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from newshub.api.deps import get_current_author
from newshub.db.postgres import get_session
from newshub.db.storage import ObjectStorage, get_storage
from newshub.main import app
from newshub.models import Article, ArticleStatus
from newshub.schemas.auth import AuthUser
from newshub.services.auth_service import AuthClient, get_auth_client


@pytest.fixture
def author() -> AuthUser:
    return AuthUser(id="author-1", email="editor@example.com")


@pytest.fixture
def db_session() -> MagicMock:
    """Async session double; service tests set the awaited methods they need."""
    session = MagicMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.fixture
def storage() -> MagicMock:
    mock = MagicMock(spec=ObjectStorage)
    mock.upload = AsyncMock(
        side_effect=lambda kind, name, data, content_type=None: f"https://cdn.example.com/{kind}/{name}"
    )
    return mock


@pytest.fixture
def auth_client() -> MagicMock:
    return MagicMock(spec=AuthClient)


@pytest.fixture
def make_article():
    def _make(**overrides) -> Article:
        fields = {
            "title": "Hello world",
            "content": "<p>Some body text</p>",
            "excerpt": "Some body text",
            "status": ArticleStatus.PUBLISHED,
            "author_id": "author-1",
            "attachments": [],
        }
        fields.update(overrides)
        return Article(**fields)

    return _make


@pytest.fixture
def client(author, db_session, storage, auth_client):
    """Test client with the database, storage and signed-in author replaced."""
    app.dependency_overrides[get_session] = lambda: db_session
    app.dependency_overrides[get_current_author] = lambda: author
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_auth_client] = lambda: auth_client
    yield TestClient(app)
    app.dependency_overrides.clear()
