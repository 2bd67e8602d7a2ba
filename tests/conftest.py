"""
Test configuration and fixtures for Crawler tests
"""

import os

# Set ENVIRONMENT before importing any modules that use the settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("CRAWL_AUTOSTART", "true")

import pytest
from unittest.mock import MagicMock, AsyncMock
from fastapi.testclient import TestClient


@pytest.fixture
def url_store():
    """Fresh HostUrlStore installed on the worker manager"""
    from hostcrawl.db import HostUrlStore
    from hostcrawl.workers.manager import worker_manager

    store = HostUrlStore()
    original = worker_manager.url_store
    worker_manager.url_store = store
    worker_manager.worker.url_store = store

    yield store

    worker_manager.url_store = original
    worker_manager.worker.url_store = original


@pytest.fixture
def test_client(url_store):
    """FastAPI test client with the lifespan (and intake worker) running"""
    from hostcrawl.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def mock_aiohttp_session():
    """Mock aiohttp ClientSession"""
    session = MagicMock()

    # Mock response
    response = AsyncMock()
    response.status = 200
    response.headers = {"Content-Type": "text/html"}
    response.text = AsyncMock(return_value="<html><body>Test</body></html>")

    # Setup context manager
    session.get.return_value.__aenter__.return_value = response

    return session


def make_fetcher(pages: dict[str, str]):
    """Build a fetch_page replacement serving pages from a dict (None if missing)"""

    async def fake_fetch(session, url):
        return pages.get(url)

    return AsyncMock(side_effect=fake_fetch)
