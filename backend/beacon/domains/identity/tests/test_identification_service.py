"""Tests for IdentificationService entry points."""

from datetime import datetime, timezone

import pytest

from beacon.core.context import IdentityContext, RequestContext
from beacon.core.exceptions import UnknownIdentityKindError
from beacon.domains.identity.tests.conftest import (
    INSTALL_ID,
    VERSION,
    _make_account,
    _make_service,
)
from beacon.schemas.account import AuthType, User
from beacon.schemas.group import InstallationGroup, TenantGroup
from beacon.schemas.identity import Hosting, IdentityType, UserIdentity

TS = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Group identification
# ---------------------------------------------------------------------------


class TestInstallationGroup:
    @pytest.mark.asyncio
    async def test_emits_group_then_linked_actor(self):
        service, sink, _ = _make_service(self_hosted=True)

        await service.identify_installation_group(INSTALL_ID, TS)

        assert sink.methods() == ["identify_group", "identify"]
        group = sink.get("identify_group").payload
        actor = sink.get("identify").payload
        assert isinstance(group, InstallationGroup)
        assert group.id == INSTALL_ID
        assert group.version == VERSION
        assert group.hosting == Hosting.SELF
        assert actor.id == f"$installation_{INSTALL_ID}"
        assert actor.version == VERSION
        assert [c.timestamp for c in sink.calls] == [TS, TS]

    @pytest.mark.asyncio
    async def test_timestamp_defaults_to_none(self):
        service, sink, _ = _make_service()

        await service.identify_installation_group(INSTALL_ID)

        assert [c.timestamp for c in sink.calls] == [None, None]


class TestTenantGroup:
    @pytest.mark.asyncio
    async def test_with_account(self, ctx, account):
        service, sink, _ = _make_service()

        await service.identify_tenant_group(ctx, "acme", account, 1700000000000)

        assert sink.methods() == ["identify_group", "identify"]
        group = sink.get("identify_group").payload
        actor = sink.get("identify").payload
        assert isinstance(group, TenantGroup)
        assert group.id == "acme"
        assert actor.id == "$tenant_acme"
        for record in (group, actor):
            assert record.hosting == account.hosting
            assert record.company_size == "10-50"
            assert record.profession == "engineering"
            assert record.installation_id == INSTALL_ID
        assert [c.timestamp for c in sink.calls] == [1700000000000, 1700000000000]

    @pytest.mark.asyncio
    async def test_without_account_uses_env_hosting(self, ctx):
        service, sink, _ = _make_service(self_hosted=True)

        await service.identify_tenant_group(ctx, "default")

        group = sink.get("identify_group").payload
        assert group.hosting == Hosting.SELF
        assert group.profession is None
        assert group.company_size is None

    @pytest.mark.asyncio
    async def test_self_hosted_group_uses_unique_tenant_id(self, ctx):
        service, sink, ids = _make_service(self_hosted=True)

        await service.identify_tenant_group(ctx, "default")

        assert sink.get("identify_group").payload.id == "unique_default"
        assert sink.get("identify").payload.id == "$tenant_unique_default"
        assert ids.requested == ["default"]

    @pytest.mark.asyncio
    async def test_sink_failure_aborts_call(self, ctx):
        service, sink, _ = _make_service()
        sink._fail_with = ConnectionError("posthog down")

        with pytest.raises(ConnectionError):
            await service.identify_tenant_group(ctx, "acme")

        assert sink.methods() == ["identify_group"]


# ---------------------------------------------------------------------------
# User / account identification
# ---------------------------------------------------------------------------


class TestIdentifyUser:
    @pytest.mark.asyncio
    async def test_account_holder(self, ctx):
        service, sink, _ = _make_service()
        user = User(id="us_1", tenant_id="acme", builder=True, admin=False, provider_type="google")
        account = _make_account(platform_user_id="us_1", verified=True, hosting=Hosting.CLOUD)

        await service.identify_user(ctx, user, account, TS)

        call = sink.get("identify")
        identity = call.payload
        assert isinstance(identity, UserIdentity)
        assert identity.id == "us_1"
        assert identity.tenant_id == "acme"
        assert identity.account_holder is True
        assert identity.verified is True
        assert identity.builder is True
        assert identity.admin is False
        assert identity.provider_type == "google"
        assert identity.hosting == Hosting.CLOUD
        assert call.timestamp == TS

    @pytest.mark.asyncio
    async def test_not_account_holder(self, ctx):
        service, sink, _ = _make_service()
        user = User(id="us_2", tenant_id="acme")
        account = _make_account(platform_user_id="us_1", verified=True)

        await service.identify_user(ctx, user, account)

        identity = sink.get("identify").payload
        assert identity.account_holder is False
        assert identity.verified is False

    @pytest.mark.asyncio
    async def test_without_account(self, ctx):
        service, sink, _ = _make_service(self_hosted=True)
        user = User(id="us_3", tenant_id="default")

        await service.identify_user(ctx, user)

        identity = sink.get("identify").payload
        assert identity.account_holder is False
        assert identity.verified is False
        assert identity.hosting == Hosting.SELF
        assert identity.tenant_id == "unique_default"


class TestIdentifyAccount:
    @pytest.mark.asyncio
    async def test_linked_platform_user_id_replaces_account_id(self):
        service, sink, _ = _make_service()
        account = _make_account(account_id="acc-9", platform_user_id="us_9")

        await service.identify_account(account)

        identity = sink.get("identify").payload
        assert identity.id == "us_9"
        assert identity.account_holder is True
        assert identity.verified is True
        assert identity.tenant_id == "acme"

    @pytest.mark.asyncio
    async def test_account_id_used_without_link(self):
        service, sink, _ = _make_service()

        await service.identify_account(_make_account(account_id="acc-9"))

        assert sink.get("identify").payload.id == "acc-9"

    @pytest.mark.asyncio
    async def test_self_hosted_account_keeps_account_id(self):
        service, sink, _ = _make_service()
        account = _make_account(
            account_id="acc-9", platform_user_id="us_9", hosting=Hosting.SELF
        )

        await service.identify_account(account)

        assert sink.get("identify").payload.id == "acc-9"

    @pytest.mark.asyncio
    async def test_provider_type_only_for_sso(self):
        service, sink, _ = _make_service()

        await service.identify_account(
            _make_account(auth_type=AuthType.SSO, provider_type="okta")
        )
        await service.identify_account(
            _make_account(auth_type=AuthType.PASSWORD, provider_type="okta")
        )

        sso, password = [c.payload for c in sink.get_all("identify")]
        assert sso.provider_type == "okta"
        assert password.provider_type is None


# ---------------------------------------------------------------------------
# identify_current
# ---------------------------------------------------------------------------


class TestIdentifyCurrent:
    @pytest.mark.asyncio
    async def test_identifies_resolved_identity(self):
        service, sink, _ = _make_service()
        ctx = RequestContext("acme", identity=IdentityContext(IdentityType.USER, id="us_1"))

        identity = await service.identify_current(ctx, TS)

        assert sink.get("identify").payload == identity
        assert sink.get("identify").timestamp == TS

    @pytest.mark.asyncio
    async def test_unknown_kind_propagates_without_emitting(self):
        service, sink, _ = _make_service()
        ctx = RequestContext("acme", identity=IdentityContext("robot"))

        with pytest.raises(UnknownIdentityKindError):
            await service.identify_current(ctx)

        assert sink.calls == []
