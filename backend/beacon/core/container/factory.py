"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container with environment-appropriate implementations.

Design principles:
- Single place for all wiring decisions
- Settings are read once here; components receive plain values
- Fail fast: broken wiring crashes at startup
"""

from redis.asyncio import Redis

from beacon.adapters.analytics import (
    CompositeAnalyticsSink,
    LoggingAnalyticsSink,
    PostHogAnalyticsSink,
)
from beacon.adapters.cache import InMemoryTTLCache, RedisTTLCache
from beacon.adapters.config_store import InMemoryConfigStore, SqlAlchemyConfigStore
from beacon.adapters.installation import FileInstallationRegistry
from beacon.core.config import CacheBackendType, ConfigStoreBackendType, Settings
from beacon.core.container.container import Container
from beacon.core.logging import logger
from beacon.core.protocols import AnalyticsSink, ConfigStore, TTLCache
from beacon.db.session import create_engine
from beacon.domains.identity.resolver import IdentityResolver
from beacon.domains.identity.service import IdentificationService
from beacon.domains.identity.tenant_ids import UniqueTenantIdCache


def create_container(settings: Settings) -> Container:
    """Build container with environment-appropriate implementations.

    Args:
        settings: Application settings (from core/config)

    Returns:
        Fully constructed Container ready for use
    """
    analytics_sink = _create_analytics_sink(settings)
    cache = _create_cache(settings)
    config_store = _create_config_store(settings)

    installation_registry = FileInstallationRegistry(
        settings.INSTALLATION_ID_PATH,
        override=settings.INSTALLATION_ID,
        version=settings.APP_VERSION,
    )

    unique_tenant_ids = UniqueTenantIdCache(config_store=config_store, cache=cache)

    identity_resolver = IdentityResolver(
        installation_registry=installation_registry,
        unique_tenant_ids=unique_tenant_ids,
        self_hosted=settings.SELF_HOSTED,
        deployment_role=settings.SERVICE,
    )

    identification_service = IdentificationService(
        sink=analytics_sink,
        resolver=identity_resolver,
        version=settings.APP_VERSION,
    )

    logger.info(
        f"Container built (self_hosted={settings.SELF_HOSTED}, "
        f"service={settings.SERVICE.value}, cache={settings.CACHE_BACKEND.value}, "
        f"config_store={settings.CONFIG_STORE_BACKEND.value})"
    )

    return Container(
        analytics_sink=analytics_sink,
        cache=cache,
        config_store=config_store,
        installation_registry=installation_registry,
        unique_tenant_ids=unique_tenant_ids,
        identity_resolver=identity_resolver,
        identification_service=identification_service,
    )


# ---------------------------------------------------------------------------
# Private factory functions
# ---------------------------------------------------------------------------


def _create_analytics_sink(settings: Settings) -> AnalyticsSink:
    """PostHog, plus a logging processor when ANALYTICS_LOG_EVENTS is set."""
    sinks: list[AnalyticsSink] = [PostHogAnalyticsSink(settings)]
    if settings.ANALYTICS_LOG_EVENTS:
        sinks.append(LoggingAnalyticsSink(logger))
    return CompositeAnalyticsSink(sinks)


def _create_cache(settings: Settings) -> TTLCache:
    if settings.CACHE_BACKEND == CacheBackendType.REDIS:
        client = Redis(
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            decode_responses=True,
        )
        return RedisTTLCache(client)
    return InMemoryTTLCache()


def _create_config_store(settings: Settings) -> ConfigStore:
    if settings.CONFIG_STORE_BACKEND == ConfigStoreBackendType.SQL:
        return SqlAlchemyConfigStore(create_engine(settings.DATABASE_URL))
    return InMemoryConfigStore()


async def prepare_container(container: Container) -> None:
    """Run the async startup steps the synchronous factory cannot.

    Await once after building the container and before the first
    identification call: it creates the config store's schema when the
    store is backed by a database.
    """
    await container.config_store.initialize()
    logger.info("Container storage prepared")
