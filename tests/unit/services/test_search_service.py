"""
Tests for SearchService.

Exercises validation, caching and end-to-end pagination through a fake
transport and an in-memory cache.
"""

from __future__ import annotations

import json

import pytest

from tests.factories.fakes import FakeClock, FakeTransport
from tests.factories.innertube_payloads import (
    make_channel_renderer,
    make_continuation_item,
    make_continuation_response,
    make_initial_response,
    make_item_section,
    make_video_renderer,
)
from tests.factories.search_result_factory import VideoResultFactory
from tubesearch.exceptions import NetworkError, SearchFailedError, ValidationError
from tubesearch.models.enums import SearchType
from tubesearch.models.results import ChannelResult, VideoResult, search_results_adapter
from tubesearch.services.cache import LRUCache, MemoryStore
from tubesearch.services.paginator import SearchPaginator
from tubesearch.services.search_service import SearchService

# Mark all tests in this module as async by default
pytestmark = pytest.mark.asyncio


def _single_video_page(video_id: str = "v1") -> dict:
    return make_initial_response(make_item_section(make_video_renderer(video_id=video_id)))


class TestValidation:
    """Invalid input is rejected before any request."""

    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    async def test_blank_query(
        self,
        search_service: SearchService,
        fake_transport: FakeTransport,
        query: str,
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await search_service.search(query)

        assert exc_info.value.field_name == "query"
        assert exc_info.value.message == "Query is required"
        assert fake_transport.calls == []

    async def test_negative_limit(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await search_service.search("lofi", limit=-1)

        assert exc_info.value.field_name == "limit"
        assert fake_transport.calls == []

    async def test_unknown_type(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await search_service.search("lofi", search_type="shorts")

        assert exc_info.value.field_name == "search_type"
        assert "video, channel, playlist, all" in exc_info.value.message
        assert fake_transport.calls == []


class TestSearch:
    """End-to-end searches through the paginator."""

    async def test_mixed_results_across_two_pages(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue(
            make_initial_response(
                make_item_section(
                    make_video_renderer(video_id="v1"),
                    make_channel_renderer(channel_id="c1"),
                    make_video_renderer(video_id="v2"),
                ),
                make_continuation_item("T1"),
            ),
            make_continuation_response(
                make_item_section(make_video_renderer(video_id="v3"))
            ),
        )

        results = await search_service.search("rick", limit=5, search_type="all")

        assert [(r.type, r.id) for r in results] == [
            ("video", "v1"),
            ("channel", "c1"),
            ("video", "v2"),
            ("video", "v3"),
        ]
        assert isinstance(results[1], ChannelResult)
        assert len(fake_transport.calls) == 2

    async def test_defaults_to_videos(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue(
            make_initial_response(
                make_item_section(
                    make_channel_renderer(channel_id="c1"),
                    make_video_renderer(video_id="v1"),
                )
            )
        )

        results = await search_service.search("rick")

        assert [r.id for r in results] == ["v1"]
        assert all(isinstance(r, VideoResult) for r in results)

    async def test_default_limit_applies(self, fake_transport: FakeTransport) -> None:
        service = SearchService(
            SearchPaginator(fake_transport), cache=None, default_limit=2
        )
        fake_transport.queue(
            make_initial_response(
                make_item_section(*(make_video_renderer(video_id=f"v{i}") for i in range(5)))
            )
        )

        results = await service.search("q")

        assert [r.id for r in results] == ["v0", "v1"]

    async def test_transport_failure_propagates(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue(NetworkError())

        with pytest.raises(SearchFailedError):
            await search_service.search("lofi")


class TestCaching:
    """Tests for the result cache in front of the paginator."""

    async def test_repeat_search_is_served_from_cache(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue(_single_video_page("v1"))

        first = await search_service.search("lofi", limit=5)
        second = await search_service.search("lofi", limit=5)

        assert second == first
        assert len(fake_transport.calls) == 1

    async def test_key_includes_limit_and_type(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue(
            _single_video_page("v1"), _single_video_page("v1"), _single_video_page("v1")
        )

        await search_service.search("lofi", limit=5)
        await search_service.search("lofi", limit=6)
        await search_service.search("lofi", limit=5, search_type="all")

        assert len(fake_transport.calls) == 3

    async def test_eviction_causes_refetch(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        for i in range(4):
            fake_transport.queue(_single_video_page(f"v{i}"))
        await search_service.search("q0")
        await search_service.search("q1")
        await search_service.search("q2")
        await search_service.search("q3")

        fake_transport.queue(_single_video_page("v0"))
        results = await search_service.search("q0")

        assert [r.id for r in results] == ["v0"]
        assert len(fake_transport.calls) == 5

    async def test_expired_entry_causes_refetch(
        self,
        search_service: SearchService,
        fake_transport: FakeTransport,
        fake_clock: FakeClock,
    ) -> None:
        fake_transport.queue(_single_video_page("v1"), _single_video_page("v2"))

        await search_service.search("lofi")
        fake_clock.advance(61.0)
        results = await search_service.search("lofi")

        assert [r.id for r in results] == ["v2"]
        assert len(fake_transport.calls) == 2

    async def test_empty_results_are_cached(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue(make_initial_response())

        assert await search_service.search("nothing") == []
        assert await search_service.search("nothing") == []
        assert len(fake_transport.calls) == 1

    async def test_failed_search_is_not_cached(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue(NetworkError(), _single_video_page("v1"))

        with pytest.raises(SearchFailedError):
            await search_service.search("lofi")
        results = await search_service.search("lofi")

        assert [r.id for r in results] == ["v1"]

    async def test_cached_value_is_json_records(
        self,
        search_service: SearchService,
        fake_transport: FakeTransport,
        lru_cache: LRUCache,
    ) -> None:
        fake_transport.queue(_single_video_page("dQw4w9WgXcQ"))

        await search_service.search("rick", limit=1)

        key = SearchService.cache_key("rick", 1, SearchType.VIDEO)
        cached = lru_cache.get(key)
        assert cached[0]["id"] == "dQw4w9WgXcQ"
        assert cached[0]["type"] == "video"

    async def test_invalid_cached_value_is_miss(
        self,
        search_service: SearchService,
        fake_transport: FakeTransport,
        lru_cache: LRUCache,
    ) -> None:
        key = SearchService.cache_key("lofi", 20, SearchType.VIDEO)
        lru_cache.set(key, [{"type": "unknown"}])
        fake_transport.queue(_single_video_page("v1"))

        results = await search_service.search("lofi")

        assert [r.id for r in results] == ["v1"]

    async def test_seeded_cache_hit(
        self,
        search_service: SearchService,
        fake_transport: FakeTransport,
        lru_cache: LRUCache,
    ) -> None:
        videos = [VideoResultFactory(), VideoResultFactory()]
        key = SearchService.cache_key("seeded", 20, SearchType.VIDEO)
        lru_cache.set(key, search_results_adapter.dump_python(videos, mode="json"))

        results = await search_service.search("seeded")

        assert results == videos
        assert fake_transport.calls == []

    async def test_caching_disabled(self, fake_transport: FakeTransport) -> None:
        service = SearchService(SearchPaginator(fake_transport), cache=None)
        fake_transport.queue(_single_video_page(), _single_video_page())

        await service.search("lofi")
        await service.search("lofi")

        assert len(fake_transport.calls) == 2


class TestClearCache:
    """Tests for clear_cache."""

    async def test_clear_forces_refetch(
        self, search_service: SearchService, fake_transport: FakeTransport
    ) -> None:
        fake_transport.queue(_single_video_page("v1"), _single_video_page("v1"))

        await search_service.search("lofi")
        search_service.clear_cache()
        await search_service.search("lofi")

        assert len(fake_transport.calls) == 2

    async def test_clear_without_cache_is_noop(self, fake_transport: FakeTransport) -> None:
        SearchService(SearchPaginator(fake_transport), cache=None).clear_cache()


class TestCacheKey:
    """Tests for cache key construction."""

    async def test_distinct_options_give_distinct_keys(self) -> None:
        keys = {
            SearchService.cache_key("a", 1, SearchType.VIDEO),
            SearchService.cache_key("a", 2, SearchType.VIDEO),
            SearchService.cache_key("a", 1, SearchType.ALL),
            SearchService.cache_key("a_1", 1, SearchType.VIDEO),
            SearchService.cache_key('a", 1', 1, SearchType.VIDEO),
        }

        assert len(keys) == 5

    async def test_key_is_json(self) -> None:
        key = SearchService.cache_key("café", 3, SearchType.CHANNEL)

        assert json.loads(key) == ["café", 3, "channel"]
        assert "café" in key


async def test_shared_store_across_services(fake_transport: FakeTransport) -> None:
    store = MemoryStore()
    fake_transport.queue(_single_video_page("v1"))
    first = SearchService(SearchPaginator(fake_transport), cache=LRUCache(store))
    await first.search("lofi")

    second = SearchService(SearchPaginator(fake_transport), cache=LRUCache(store))
    results = await second.search("lofi")

    assert [r.id for r in results] == ["v1"]
    assert len(fake_transport.calls) == 1
