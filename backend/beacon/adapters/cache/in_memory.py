"""In-memory TTL cache implementation.

Per-process dict with monotonic-clock expiry. Suitable for single-process
deployments and tests; multiple replicas each keep their own copy.

The lock only guards the dict. Producers run outside it, so two
coroutines missing the same key concurrently both run their producer and
the later result is stored.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable, Optional

from beacon.core.protocols.cache import Producer


class InMemoryTTLCache:
    """In-memory implementation of the TTLCache protocol.

    Attributes:
        clock: Zero-argument callable returning seconds; defaults to
            ``time.monotonic``. Tests inject their own to move time.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty cache."""
        self.clock = clock
        self._entries: dict[str, tuple[str, float]] = {}  # key → (value, expires_at)
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[str]:
        """Return the live value for ``key``; expired entries are dropped."""
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self.clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store ``value`` under ``key`` for ``ttl_seconds``."""
        async with self._lock:
            self._entries[key] = (value, self.clock() + ttl_seconds)

    async def delete(self, key: str) -> None:
        """Drop ``key`` if present."""
        async with self._lock:
            self._entries.pop(key, None)

    async def with_cache(self, key: str, ttl_seconds: int, producer: Producer) -> str:
        """Return the cached value or produce and cache it."""
        cached = await self.get(key)
        if cached is not None:
            return cached

        value = await producer()
        await self.set(key, value, ttl_seconds)
        return value
