"""
Pytest configuration and fixtures for tubesearch tests.
"""

from __future__ import annotations

import pytest

from tests.factories.fakes import FakeClock, FakeTransport
from tubesearch.config.settings import Settings
from tubesearch.services.cache import LRUCache, MemoryStore
from tubesearch.services.paginator import SearchPaginator
from tubesearch.services.search_service import SearchService


@pytest.fixture
def mock_settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(
        api_key="test_api_key",
        use_cache=True,
        cache_backend="memory",
        cache_capacity=3,
        cache_max_age_seconds=60.0,
        _env_file=None,
    )


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Empty fake transport; tests queue responses on it."""
    return FakeTransport()


@pytest.fixture
def fake_clock() -> FakeClock:
    """Deterministic clock for cache expiry tests."""
    return FakeClock()


@pytest.fixture
def memory_store() -> MemoryStore:
    """Unlimited in-memory store."""
    return MemoryStore()


@pytest.fixture
def lru_cache(memory_store: MemoryStore, fake_clock: FakeClock) -> LRUCache:
    """Cache with capacity 3 and a 60 second lifetime."""
    return LRUCache(
        store=memory_store,
        namespace="test_",
        max_age=60.0,
        capacity=3,
        clock=fake_clock,
    )


@pytest.fixture
def paginator(fake_transport: FakeTransport) -> SearchPaginator:
    """Paginator bound to the fake transport."""
    return SearchPaginator(transport=fake_transport, api_key="test_api_key")


@pytest.fixture
def search_service(paginator: SearchPaginator, lru_cache: LRUCache) -> SearchService:
    """Search service with a capacity-3 in-memory cache."""
    return SearchService(paginator=paginator, cache=lru_cache, default_limit=20)
