"""TTL cache adapters."""

from beacon.adapters.cache.in_memory import InMemoryTTLCache
from beacon.adapters.cache.redis import RedisTTLCache

__all__ = ["InMemoryTTLCache", "RedisTTLCache"]
