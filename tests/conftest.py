"""Pytest configuration and fixtures."""
import pytest
import pytest_asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.services.sessions import MemorySessionStore
from database.models import ArticleCreate
from database.repositories import MemoryStorage
from shared.config import settings


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Use the cheapest bcrypt cost factor in tests."""
    monkeypatch.setattr(settings, "bcrypt_rounds", 4)


@pytest.fixture
def storage():
    """Create an empty in-memory store."""
    return MemoryStorage()


@pytest.fixture
def seeded_storage():
    """Create an in-memory store with the initial articles."""
    return MemoryStorage(seed=True)


@pytest.fixture
def sessions():
    """Create an in-memory session store."""
    return MemorySessionStore(ttl=3600)


@pytest.fixture
def mock_redis_client():
    """Create mock Redis client."""
    redis = AsyncMock()

    redis.set = AsyncMock(return_value=True)
    redis.get = AsyncMock(return_value=None)
    redis.delete = AsyncMock(return_value=1)

    return redis


@pytest.fixture
def app(seeded_storage, sessions):
    """Create an app wired to fresh stores."""
    return create_app(storage=seeded_storage, sessions=sessions)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def user_payload():
    """Create sample registration data."""
    return {
        "username": "reader",
        "email": "reader@example.com",
        "password": "s3cret-pass",
        "name": "Avid Reader"
    }


@pytest_asyncio.fixture
async def auth_client(client, user_payload):
    """HTTP client with a registered, signed-in user."""
    response = await client.post("/api/auth/register", json=user_payload)
    assert response.status_code == 200
    return client


def make_article(**overrides) -> ArticleCreate:
    """Build article data with sensible defaults."""
    data = {
        "title": "Test Article Title",
        "summary": "A short summary of the test article.",
        "content": "This is the test article content...",
        "source": "TestSource",
        "category": "technology",
        "image_url": "https://example.com/image.jpg",
        "url": "https://example.com/test-article",
        "published_at": datetime(2024, 2, 4, 10, 30, tzinfo=timezone.utc),
    }
    data.update(overrides)
    return ArticleCreate(**data)


@pytest.fixture
def article_factory():
    """Expose make_article to tests."""
    return make_article
