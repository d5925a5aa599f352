"""
ArticleDesk Backend — Test Configuration (conftest.py)
========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped, fresh for each test):
    ├── seeded_store: InMemoryArticleStore holding the three demo articles
    ├── empty_store: InMemoryArticleStore with no articles
    ├── article_service: a fresh ArticleService
    └── test_client: HTTPX AsyncClient bound to an app that owns seeded_store
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_DEMO_ARTICLES"] = "true"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.models.article import SEED_ARTICLES
from app.services.article_service import ArticleService
from app.store import InMemoryArticleStore


@pytest.fixture
def seeded_store():
    """Store holding the three demo articles (ids 1, 2, 3)."""
    return InMemoryArticleStore(SEED_ARTICLES)


@pytest.fixture
def empty_store():
    """Store with no articles, for the first-id edge case."""
    return InMemoryArticleStore()


@pytest.fixture
def article_service():
    return ArticleService()


@pytest_asyncio.fixture
async def test_client(seeded_store):
    """
    Provides an async HTTP test client for endpoint testing.

    Each test gets its own app and store, so mutations don't leak between tests.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import create_app
    app = create_app(store=seeded_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
