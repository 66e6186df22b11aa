"""Cache keys and TTLs."""

from enum import Enum


class CacheKeys(str, Enum):
    """Cache key names. Tenant-scoped keys go through ``tenant_scoped_key``."""

    UNIQUE_TENANT_ID = "uniqueTenantId"


class TTL:
    """Cache lifetimes in seconds."""

    ONE_DAY = 24 * 60 * 60


def tenant_scoped_key(tenant_id: str, key: CacheKeys) -> str:
    """Cache key for ``key`` inside ``tenant_id``'s scope."""
    return f"{tenant_id}:{key.value}"
