"""Globally unique tenant ids for self-hosted deployments.

Independent self-hosted deployments happily reuse tenant ids such as
``default``. To keep their analytics apart, every tenant gets an id of the
form ``<random>_<tenant_id>`` stored in its settings document.

The derivation is cache-aside:

1. switch to the target tenant's scope (the store reads that tenant's
   document whatever tenant the caller is in),
2. serve from the TTL cache when possible (one day),
3. otherwise read the settings document; if the id is there, cache it,
4. otherwise mint one, write it with a revision check, cache it.

A write that loses a race is not retried blindly: the document is re-read
and a unique id persisted by the winner is adopted, so every caller ends
up with the persisted value. Writes that conflict for unrelated reasons
are retried against the fresh revision, up to ``_MAX_WRITE_ATTEMPTS``.
"""

from typing import Callable

from beacon.core.constants.cache import TTL, CacheKeys, tenant_scoped_key
from beacon.core.context import RequestContext, with_tenant
from beacon.core.exceptions import ConfigConflictError
from beacon.core.hashing import new_id
from beacon.core.protocols.cache import TTLCache
from beacon.core.protocols.config_store import ConfigStore
from beacon.domains.identity.protocols import UniqueTenantIdProtocol
from beacon.schemas.config import ConfigType, config_id_for

_MAX_WRITE_ATTEMPTS = 3


class UniqueTenantIdCache(UniqueTenantIdProtocol):
    """Cache-aside unique tenant id derivation over the settings document."""

    def __init__(
        self,
        config_store: ConfigStore,
        cache: TTLCache,
        id_factory: Callable[[], str] = new_id,
        ttl_seconds: int = TTL.ONE_DAY,
    ) -> None:
        """Initialize with the document store and cache.

        Args:
            config_store: Per-tenant settings documents (source of truth).
            cache: TTL cache in front of the store.
            id_factory: Random id primitive used when minting.
            ttl_seconds: Lifetime of cached ids.
        """
        self._store = config_store
        self._cache = cache
        self._id_factory = id_factory
        self._ttl = ttl_seconds

    async def get_unique_tenant_id(self, ctx: RequestContext, tenant_id: str) -> str:
        """Return the tenant's unique id, minting and persisting it on first use."""
        return await with_tenant(ctx, tenant_id, self._cached)

    async def _cached(self, ctx: RequestContext) -> str:
        key = tenant_scoped_key(ctx.tenant_id, CacheKeys.UNIQUE_TENANT_ID)
        return await self._cache.with_cache(key, self._ttl, lambda: self._load_or_mint(ctx))

    async def _load_or_mint(self, ctx: RequestContext) -> str:
        for attempt in range(1, _MAX_WRITE_ATTEMPTS + 1):
            doc = await self._store.get_scoped_full_config(ctx, ConfigType.SETTINGS)
            if doc.config.unique_tenant_id:
                return doc.config.unique_tenant_id

            unique_id = f"{self._id_factory()}_{ctx.tenant_id}"
            doc.config.unique_tenant_id = unique_id
            try:
                await self._store.put(ctx, doc)
            except ConfigConflictError:
                ctx.logger.warning(
                    f"Settings changed while minting unique tenant id "
                    f"(attempt {attempt}/{_MAX_WRITE_ATTEMPTS}), re-reading"
                )
                continue

            ctx.logger.info(f"Minted unique tenant id {unique_id}")
            return unique_id

        raise ConfigConflictError(
            ctx.tenant_id,
            config_id_for(ConfigType.SETTINGS),
            None,
            message=(
                f"Could not persist a unique tenant id for '{ctx.tenant_id}' "
                f"after {_MAX_WRITE_ATTEMPTS} attempts"
            ),
        )
