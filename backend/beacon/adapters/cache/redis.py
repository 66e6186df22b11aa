"""Redis-backed TTL cache.

Shares cached values across processes. Entries are plain strings written
with ``SETEX`` so Redis handles expiry.
"""

from __future__ import annotations

from typing import Optional

from redis.asyncio import Redis

from beacon.core.protocols.cache import Producer


class RedisTTLCache:
    """Redis implementation of the TTLCache protocol."""

    def __init__(self, client: Redis, namespace: str = "beacon:cache") -> None:
        """Wrap ``client``; every key is prefixed with ``namespace``."""
        self._client = client
        self._namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    async def get(self, key: str) -> Optional[str]:
        """Return the live value for ``key``, or None."""
        raw = await self._client.get(self._key(key))
        if raw is None:
            return None
        return raw.decode() if isinstance(raw, bytes) else raw

    async def delete(self, key: str) -> None:
        """Drop ``key`` if present."""
        await self._client.delete(self._key(key))

    async def with_cache(self, key: str, ttl_seconds: int, producer: Producer) -> str:
        """Return the cached value or produce, ``SETEX`` and return it."""
        cached = await self.get(key)
        if cached is not None:
            return cached

        value = await producer()
        await self._client.setex(self._key(key), ttl_seconds, value)
        return value
