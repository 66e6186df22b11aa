"""Fake TTL cache for testing."""

from typing import Optional

from beacon.core.protocols.cache import Producer


class FakeTTLCache:
    """Dict-backed TTLCache without expiry that records lookups.

    ``evict_all()`` simulates a process restart or TTL expiry.
    """

    def __init__(self) -> None:
        """Initialize empty."""
        self.entries: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.hits = 0
        self.misses = 0

    async def get(self, key: str) -> Optional[str]:
        """Return the stored value, if any."""
        return self.entries.get(key)

    async def delete(self, key: str) -> None:
        """Drop ``key``."""
        self.entries.pop(key, None)
        self.ttls.pop(key, None)

    async def with_cache(self, key: str, ttl_seconds: int, producer: Producer) -> str:
        """Return the stored value or produce and store it."""
        if key in self.entries:
            self.hits += 1
            return self.entries[key]
        self.misses += 1
        value = await producer()
        self.entries[key] = value
        self.ttls[key] = ttl_seconds
        return value

    def evict_all(self) -> None:
        """Forget every entry."""
        self.entries.clear()
        self.ttls.clear()
