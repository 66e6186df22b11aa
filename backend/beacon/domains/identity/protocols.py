"""Identity domain protocols."""

from typing import Optional, Protocol, runtime_checkable

from beacon.core.context import RequestContext
from beacon.core.protocols.analytics import IdentifyPayload, Timestamp
from beacon.schemas.account import Account, User
from beacon.schemas.group import Group
from beacon.schemas.identity import Hosting, Identity


@runtime_checkable
class UniqueTenantIdProtocol(Protocol):
    """Globally unique tenant ids for self-hosted deployments.

    Cache-aside over the tenant's settings document: the id is minted on
    first access, persisted, and served from a TTL cache afterwards.
    """

    async def get_unique_tenant_id(self, ctx: RequestContext, tenant_id: str) -> str:
        """Return ``<random>_<tenant_id>`` for ``tenant_id``, minting it if needed."""
        ...


@runtime_checkable
class IdentityResolverProtocol(Protocol):
    """Builds identity records from request context and deployment config."""

    def get_hosting_from_env(self) -> Hosting:
        """Hosting mode of this deployment."""
        ...

    async def get_installation_id(self) -> str:
        """Installation id of this deployment."""
        ...

    async def get_event_tenant_id(self, ctx: RequestContext, tenant_id: str) -> str:
        """Tenant id as it should appear in analytics events."""
        ...

    async def get_current_identity(self, ctx: RequestContext) -> Identity:
        """Identity of whoever is acting in ``ctx``.

        Raises:
            UnknownIdentityKindError: If ``ctx.identity.type`` is not a known kind.
        """
        ...


@runtime_checkable
class IdentificationServiceProtocol(Protocol):
    """Entry points that emit identify/group calls."""

    async def identify(
        self, identity: IdentifyPayload, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Hand ``identity`` to the sink."""
        ...

    async def identify_group(self, group: Group, timestamp: Optional[Timestamp] = None) -> None:
        """Hand ``group`` to the sink."""
        ...

    async def identify_current(
        self, ctx: RequestContext, timestamp: Optional[Timestamp] = None
    ) -> Identity:
        """Resolve and identify the current actor."""
        ...

    async def identify_installation_group(
        self, install_id: str, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Identify the installation group and its linked actor."""
        ...

    async def identify_tenant_group(
        self,
        ctx: RequestContext,
        tenant_id: str,
        account: Optional[Account] = None,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Identify the tenant group and its linked actor."""
        ...

    async def identify_user(
        self,
        ctx: RequestContext,
        user: User,
        account: Optional[Account] = None,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Identify a platform user."""
        ...

    async def identify_account(self, account: Account) -> None:
        """Identify an account holder."""
        ...
