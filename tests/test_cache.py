"""Tests for the expansion cache."""

import asyncio

import pytest
from unittest.mock import AsyncMock

from src.glossary_api.cache import ExpansionCache
from src.glossary_api.models.glossary import ExpandedContent
from src.glossary_api.utils.helpers import utcnow


def content(text="p"):
    return ExpandedContent(paragraphs=[text], sources=[], loaded_at=utcnow())


class TestExpansionCache:
    """Test caller-side caching of expanded content."""

    def test_key_ignores_missing_language(self):
        key = ExpansionCache.get_cache_key("API", "d", "REST")
        assert key == ExpansionCache.get_cache_key("API", "d", "REST", None)
        assert key != ExpansionCache.get_cache_key("API", "d", "REST", "Spanish")

    @pytest.mark.asyncio
    async def test_hit_skips_factory(self):
        cache = ExpansionCache()
        key = cache.get_cache_key("API", "d", "REST")
        factory = AsyncMock(return_value=content())

        first = await cache.get_or_expand(key, factory)
        second = await cache.get_or_expand(key, factory)

        assert first is second
        factory.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_concurrent_requests_share_one_call(self):
        cache = ExpansionCache()
        key = cache.get_cache_key("API", "d", "REST")
        calls = 0

        async def slow_factory():
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            return content()

        results = await asyncio.gather(*[cache.get_or_expand(key, slow_factory) for _ in range(5)])

        assert calls == 1
        assert all(r is results[0] for r in results)
        assert cache._locks == {}

    @pytest.mark.asyncio
    async def test_failures_not_cached(self):
        cache = ExpansionCache()
        key = cache.get_cache_key("API", "d", "REST")
        factory = AsyncMock(side_effect=[RuntimeError("boom"), content()])

        with pytest.raises(RuntimeError):
            await cache.get_or_expand(key, factory)
        result = await cache.get_or_expand(key, factory)

        assert result.paragraphs == ["p"]
        assert factory.await_count == 2
        assert cache._locks == {}

    def test_invalidate_and_clear(self):
        cache = ExpansionCache()
        key_a = cache.get_cache_key("A", "d", "S")
        key_b = cache.get_cache_key("B", "d", "S")
        cache.set(key_a, content())
        cache.set(key_b, content())

        assert cache.invalidate(key_a) is True
        assert cache.invalidate(key_a) is False
        assert cache.get(key_a) is None
        assert cache.clear() == 1
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_failed_key_leaves_no_lock(self):
        cache = ExpansionCache()
        key = cache.get_cache_key("API", "d", "REST")

        with pytest.raises(RuntimeError):
            await cache.get_or_expand(key, AsyncMock(side_effect=RuntimeError("boom")))

        assert cache._locks == {}
        assert len(cache) == 0
