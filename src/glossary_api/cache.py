"""
Simple in-memory cache for expanded term content.
"""
import asyncio
from typing import Awaitable, Callable, Dict, Optional, Tuple

from .models.glossary import ExpandedContent

CacheKey = Tuple[str, str, str, str]


class ExpansionCache:
    """Caller-side cache so repeated expansions of the same term reuse one model call."""

    def __init__(self):
        self._entries: Dict[CacheKey, ExpandedContent] = {}
        self._locks: Dict[CacheKey, asyncio.Lock] = {}

    @staticmethod
    def get_cache_key(term: str, definition: str, seed_word: str, detected_language: Optional[str] = None) -> CacheKey:
        """Generates a consistent key for expansion caching."""
        return (term, definition, seed_word, detected_language or "")

    def get(self, key: CacheKey) -> Optional[ExpandedContent]:
        return self._entries.get(key)

    def set(self, key: CacheKey, content: ExpandedContent):
        self._entries[key] = content

    def invalidate(self, key: CacheKey) -> bool:
        """Drop one entry so the next request fetches fresh content."""
        return self._entries.pop(key, None) is not None

    async def get_or_expand(self, key: CacheKey, factory: Callable[[], Awaitable[ExpandedContent]]) -> ExpandedContent:
        """
        Return the cached content for ``key``, calling ``factory`` only on a miss.

        Concurrent callers with the same key wait on one lock, so only the
        first one reaches the model. Failures are not cached.
        """
        cached = self._entries.get(key)
        if cached is not None:
            return cached

        lock = self._locks.setdefault(key, asyncio.Lock())
        try:
            async with lock:
                cached = self._entries.get(key)
                if cached is not None:
                    return cached
                content = await factory()
                self.set(key, content)
                return content
        finally:
            # Waiters keep their own reference; later callers hit the entry
            if self._locks.get(key) is lock:
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> int:
        """Clears the cache and returns the count of cleared items."""
        count = len(self._entries)
        self._entries.clear()
        self._locks.clear()
        return count

# Global instance
cache = ExpansionCache()

def get_cache() -> ExpansionCache:
    """Get the global cache instance."""
    return cache
