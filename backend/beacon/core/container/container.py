"""Dependency Injection Container.

The container is a simple immutable dataclass that holds protocol implementations.
It has no construction logic: that belongs in the factory.

Design principles:
- Container serves, factory builds
- Fail fast: all construction at startup
- Type safety: fields are protocol types
- Testing: construct directly with fakes
"""

from dataclasses import dataclass

from beacon.core.protocols import AnalyticsSink, ConfigStore, InstallationRegistry, TTLCache
from beacon.domains.identity.protocols import (
    IdentificationServiceProtocol,
    IdentityResolverProtocol,
    UniqueTenantIdProtocol,
)


@dataclass(frozen=True)
class Container:
    """Immutable container holding all protocol implementations.

    Usage:
        # Production: use the global container built by factory
        from beacon.core.container import container
        await container.identification_service.identify_current(ctx)

        # Testing: construct services directly with fakes
        service = IdentificationService(sink=FakeAnalyticsSink(), ...)
    """

    # Infrastructure ports
    analytics_sink: AnalyticsSink
    cache: TTLCache
    config_store: ConfigStore
    installation_registry: InstallationRegistry

    # Identity domain
    unique_tenant_ids: UniqueTenantIdProtocol
    identity_resolver: IdentityResolverProtocol
    identification_service: IdentificationServiceProtocol
