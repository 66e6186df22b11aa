"""Identity resolution.

An identity can be:
- an installation (system-level work on a deployment),
- a tenant (background jobs, anonymous requests; also the default),
- a user.

Tenant ids in events go through ``get_event_tenant_id`` so self-hosted
tenants never collide with another deployment's tenant of the same name.
"""

from typing import Optional, assert_never

from beacon.core.config import DeploymentRole
from beacon.core.context import IdentityContext, RequestContext
from beacon.core.exceptions import UnknownIdentityKindError
from beacon.core.protocols.installation import InstallationRegistry
from beacon.domains.identity.protocols import IdentityResolverProtocol, UniqueTenantIdProtocol
from beacon.domains.identity.types import (
    ACCOUNT_PORTAL_INSTALLATION_ID,
    format_distinct_id,
    hosting_from_env,
)
from beacon.schemas.identity import (
    Hosting,
    Identity,
    IdentityType,
    InstallationIdentity,
    TenantIdentity,
    UserIdentity,
)


def _identity_kind(identity: Optional[IdentityContext]) -> IdentityType:
    if identity is None:
        return IdentityType.TENANT
    try:
        return IdentityType(identity.type)
    except ValueError:
        raise UnknownIdentityKindError(identity.type) from None


class IdentityResolver(IdentityResolverProtocol):
    """Resolves identities from request context and deployment configuration."""

    def __init__(
        self,
        *,
        installation_registry: InstallationRegistry,
        unique_tenant_ids: UniqueTenantIdProtocol,
        self_hosted: bool,
        deployment_role: DeploymentRole = DeploymentRole.APPS,
    ) -> None:
        """Initialize the resolver.

        Args:
            installation_registry: Source of this deployment's installation id.
            unique_tenant_ids: Unique tenant id derivation for self-hosting.
            self_hosted: Whether the deployment is customer-operated.
            deployment_role: Role of the running service.
        """
        self._installations = installation_registry
        self._unique_tenant_ids = unique_tenant_ids
        self._self_hosted = self_hosted
        self._deployment_role = deployment_role

    def get_hosting_from_env(self) -> Hosting:
        """Hosting mode of this deployment."""
        return hosting_from_env(self._self_hosted)

    async def get_installation_id(self) -> str:
        """Installation id; the account portal reports a fixed one."""
        if self._deployment_role == DeploymentRole.ACCOUNT_PORTAL:
            return ACCOUNT_PORTAL_INSTALLATION_ID
        install = await self._installations.get_install()
        return install.install_id

    async def get_event_tenant_id(self, ctx: RequestContext, tenant_id: str) -> str:
        """Tenant id for analytics events.

        Cloud tenant ids are already globally unique and pass through.
        """
        if self._self_hosted:
            return await self._unique_tenant_ids.get_unique_tenant_id(ctx, tenant_id)
        return tenant_id

    async def get_current_identity(self, ctx: RequestContext) -> Identity:
        """Identity of whoever is acting in ``ctx``; tenant when nobody is."""
        identity = ctx.identity
        kind = _identity_kind(identity)

        match kind:
            case IdentityType.INSTALLATION:
                installation_id = await self.get_installation_id()
                return InstallationIdentity(
                    id=format_distinct_id(installation_id, kind),
                    hosting=self.get_hosting_from_env(),
                    installation_id=installation_id,
                )
            case IdentityType.TENANT:
                installation_id = await self.get_installation_id()
                tenant_id = await self.get_event_tenant_id(ctx, ctx.tenant_id)
                return TenantIdentity(
                    id=format_distinct_id(tenant_id, kind),
                    hosting=self.get_hosting_from_env(),
                    installation_id=installation_id,
                    tenant_id=tenant_id,
                )
            case IdentityType.USER:
                tenant_id = await self.get_event_tenant_id(ctx, ctx.tenant_id)
                installation_id = await self.get_installation_id()
                account = identity.account
                hosting = account.hosting if account else self.get_hosting_from_env()
                return UserIdentity(
                    id=identity.id,
                    hosting=hosting,
                    installation_id=installation_id,
                    tenant_id=tenant_id,
                )
            case _:
                assert_never(kind)
