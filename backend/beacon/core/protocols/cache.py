"""TTLCache protocol for read-through caching.

Caches are per-process or shared accelerators, never the source of truth.
A value is only stored after its producer returns; a failing producer
leaves the cache as it was.

Usage:
    value = await cache.with_cache(key, TTL.ONE_DAY, load_value)
"""

from typing import Awaitable, Callable, Optional, Protocol, runtime_checkable

Producer = Callable[[], Awaitable[str]]


@runtime_checkable
class TTLCache(Protocol):
    """String-valued cache with per-entry expiry."""

    async def with_cache(self, key: str, ttl_seconds: int, producer: Producer) -> str:
        """Return the cached value for ``key`` or produce, store and return it.

        Args:
            key: Fully qualified cache key.
            ttl_seconds: Lifetime of a freshly stored value.
            producer: Called on a miss; its result is cached.

        Returns:
            The cached or freshly produced value.
        """
        ...

    async def get(self, key: str) -> Optional[str]:
        """Return the live value for ``key``, or None."""
        ...

    async def delete(self, key: str) -> None:
        """Drop ``key`` if present."""
        ...
