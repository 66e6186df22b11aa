"""Identity domain test fixtures and helpers."""

from typing import Optional

import pytest

from beacon.adapters.analytics.fake import FakeAnalyticsSink
from beacon.adapters.installation.static import StaticInstallationRegistry
from beacon.core.config import DeploymentRole
from beacon.domains.identity.fakes import FakeUniqueTenantIds
from beacon.domains.identity.resolver import IdentityResolver
from beacon.domains.identity.service import IdentificationService
from beacon.schemas.account import Account, AuthType
from beacon.schemas.identity import Hosting

INSTALL_ID = "inst-1"
VERSION = "1.2.3"


def _make_account(**overrides) -> Account:
    defaults = dict(
        account_id="acc-1",
        tenant_id="acme",
        email="owner@acme.test",
        hosting=Hosting.CLOUD,
        verified=True,
        auth_type=AuthType.PASSWORD,
        profession="engineering",
        size="10-50",
        platform_user_id=None,
    )
    defaults.update(overrides)
    return Account(**defaults)


def _make_resolver(
    *,
    self_hosted: bool = False,
    deployment_role: DeploymentRole = DeploymentRole.APPS,
    unique_tenant_ids: Optional[FakeUniqueTenantIds] = None,
    installations: Optional[StaticInstallationRegistry] = None,
) -> tuple[IdentityResolver, FakeUniqueTenantIds, StaticInstallationRegistry]:
    """Build an IdentityResolver wired to fakes. Returns (resolver, *fakes)."""
    ids = unique_tenant_ids or FakeUniqueTenantIds()
    inst = installations or StaticInstallationRegistry(INSTALL_ID, version=VERSION)
    resolver = IdentityResolver(
        installation_registry=inst,
        unique_tenant_ids=ids,
        self_hosted=self_hosted,
        deployment_role=deployment_role,
    )
    return resolver, ids, inst


def _make_service(
    *, self_hosted: bool = False
) -> tuple[IdentificationService, FakeAnalyticsSink, FakeUniqueTenantIds]:
    """Build an IdentificationService wired to fakes. Returns (service, sink, ids)."""
    resolver, ids, _ = _make_resolver(self_hosted=self_hosted)
    sink = FakeAnalyticsSink()
    service = IdentificationService(sink=sink, resolver=resolver, version=VERSION)
    return service, sink, ids


@pytest.fixture
def account():
    return _make_account()
