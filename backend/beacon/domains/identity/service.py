"""Identification service: the identify/group entry points.

Group identification emits two calls. The first identifies the group
under its raw id. The second identifies an actor with the group's
attributes under the formatted distinct id (``$tenant_<id>``), which is
how the analytics backend links the auto-created actor to the group.
"""

from typing import Optional, Union

from beacon.core.context import RequestContext
from beacon.core.logging import logger
from beacon.core.protocols.analytics import AnalyticsSink, IdentifyPayload, Timestamp
from beacon.domains.identity.protocols import (
    IdentificationServiceProtocol,
    IdentityResolverProtocol,
)
from beacon.domains.identity.types import format_distinct_id
from beacon.schemas.account import Account, User
from beacon.schemas.group import InstallationGroup, TenantGroup
from beacon.schemas.identity import Identity, UserIdentity


class IdentificationService(IdentificationServiceProtocol):
    """Builds identity and group records and hands them to the sink."""

    def __init__(
        self,
        *,
        sink: AnalyticsSink,
        resolver: IdentityResolverProtocol,
        version: str,
    ) -> None:
        """Initialize the service.

        Args:
            sink: Where identify/group calls go.
            resolver: Identity resolution (hosting, installation, tenant ids).
            version: Application version reported on installation groups.
        """
        self._sink = sink
        self._resolver = resolver
        self._version = version

    async def identify(
        self, identity: IdentifyPayload, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Hand ``identity`` to the sink."""
        await self._sink.identify(identity, timestamp)

    async def identify_group(
        self, group: Union[InstallationGroup, TenantGroup], timestamp: Optional[Timestamp] = None
    ) -> None:
        """Hand ``group`` to the sink."""
        await self._sink.identify_group(group, timestamp)

    async def identify_current(
        self, ctx: RequestContext, timestamp: Optional[Timestamp] = None
    ) -> Identity:
        """Resolve the current identity, identify it and return it."""
        identity = await self._resolver.get_current_identity(ctx)
        await self.identify(identity, timestamp)
        return identity

    async def identify_installation_group(
        self, install_id: str, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Identify this installation as a group."""
        group = InstallationGroup(
            id=install_id,
            hosting=self._resolver.get_hosting_from_env(),
            version=self._version,
        )
        await self._identify_group_with_actor(group, timestamp)
        logger.debug(f"Identified installation group {install_id}")

    async def identify_tenant_group(
        self,
        ctx: RequestContext,
        tenant_id: str,
        account: Optional[Account] = None,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Identify a tenant as a group.

        Profession, company size and hosting come from ``account`` when the
        tenant has one; otherwise hosting comes from the deployment.
        """
        group_id = await self._resolver.get_event_tenant_id(ctx, tenant_id)
        installation_id = await self._resolver.get_installation_id()

        if account:
            group = TenantGroup(
                id=group_id,
                hosting=account.hosting,
                installation_id=installation_id,
                profession=account.profession,
                company_size=account.size,
            )
        else:
            group = TenantGroup(
                id=group_id,
                hosting=self._resolver.get_hosting_from_env(),
                installation_id=installation_id,
            )

        await self._identify_group_with_actor(group, timestamp)
        ctx.logger.debug(f"Identified tenant group {group_id}")

    async def identify_user(
        self,
        ctx: RequestContext,
        user: User,
        account: Optional[Account] = None,
        timestamp: Optional[Timestamp] = None,
    ) -> None:
        """Identify a platform user, optionally with its cloud account."""
        tenant_id = await self._resolver.get_event_tenant_id(ctx, user.tenant_id)
        account_holder = account is not None and account.platform_user_id == user.id
        installation_id = await self._resolver.get_installation_id()

        identity = UserIdentity(
            id=user.id,
            hosting=account.hosting if account else self._resolver.get_hosting_from_env(),
            installation_id=installation_id,
            tenant_id=tenant_id,
            verified=account.verified if account_holder else False,
            account_holder=account_holder,
            provider_type=user.provider_type,
            builder=user.builder,
            admin=user.admin,
        )
        await self.identify(identity, timestamp)

    async def identify_account(self, account: Account) -> None:
        """Identify an account holder.

        A cloud account linked to a platform user is identified under the
        user's id so both converge on one analytics actor.
        """
        id = account.account_id
        if account.is_cloud and account.platform_user_id:
            id = account.platform_user_id

        identity = UserIdentity(
            id=id,
            hosting=account.hosting,
            installation_id=await self._resolver.get_installation_id(),
            tenant_id=account.tenant_id,
            verified=account.verified,
            account_holder=True,
            provider_type=account.provider_type if account.is_sso else None,
        )
        await self.identify(identity)

    async def _identify_group_with_actor(
        self, group: Union[InstallationGroup, TenantGroup], timestamp: Optional[Timestamp]
    ) -> None:
        await self.identify_group(group, timestamp)
        actor = group.model_copy(update={"id": format_distinct_id(group.id, group.type)})
        await self.identify(actor, timestamp)
