"""Tests for SqlAlchemyConfigStore on an in-memory SQLite database."""

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from beacon.adapters.config_store.sqlalchemy import SqlAlchemyConfigStore
from beacon.core.context import RequestContext
from beacon.core.exceptions import ConfigConflictError
from beacon.db.session import create_engine
from beacon.schemas.config import ConfigDoc, ConfigType


@pytest_asyncio.fixture
async def store():
    engine = create_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    store = SqlAlchemyConfigStore(engine)
    await store.initialize()
    yield store
    await engine.dispose()


@pytest.mark.asyncio
async def test_missing_document_is_blank(store, ctx):
    doc = await store.get_scoped_full_config(ctx, ConfigType.SETTINGS)

    assert doc.rev is None
    assert doc.config.unique_tenant_id is None


@pytest.mark.asyncio
async def test_insert_then_update(store, ctx):
    doc = ConfigDoc.blank(ConfigType.SETTINGS)
    doc.config.unique_tenant_id = "abc_default"

    created = await store.put(ctx, doc)
    created.config.company = "Acme"
    updated = await store.put(ctx, created)

    loaded = await store.get_scoped_full_config(ctx, ConfigType.SETTINGS)
    assert created.rev == 1
    assert updated.rev == 2
    assert loaded.rev == 2
    assert loaded.config.unique_tenant_id == "abc_default"
    assert loaded.config.company == "Acme"


@pytest.mark.asyncio
async def test_second_creator_conflicts(store, ctx):
    first = ConfigDoc.blank(ConfigType.SETTINGS)
    first.config.unique_tenant_id = "first_default"
    second = ConfigDoc.blank(ConfigType.SETTINGS)
    second.config.unique_tenant_id = "second_default"

    await store.put(ctx, first)
    with pytest.raises(ConfigConflictError):
        await store.put(ctx, second)

    loaded = await store.get_scoped_full_config(ctx, ConfigType.SETTINGS)
    assert loaded.config.unique_tenant_id == "first_default"


@pytest.mark.asyncio
async def test_stale_update_conflicts(store, ctx):
    created = await store.put(ctx, ConfigDoc.blank(ConfigType.SETTINGS))
    stale = created.model_copy(deep=True)
    await store.put(ctx, created)

    stale.config.unique_tenant_id = "late_default"
    with pytest.raises(ConfigConflictError):
        await store.put(ctx, stale)

    loaded = await store.get_scoped_full_config(ctx, ConfigType.SETTINGS)
    assert loaded.rev == 2
    assert loaded.config.unique_tenant_id is None


@pytest.mark.asyncio
async def test_tenants_are_isolated(store):
    doc = ConfigDoc.blank(ConfigType.SETTINGS)
    doc.config.unique_tenant_id = "abc_acme"
    await store.put(RequestContext("acme"), doc)

    other = await store.get_scoped_full_config(RequestContext("other"), ConfigType.SETTINGS)

    assert other.rev is None


@pytest.mark.asyncio
async def test_initialize_is_idempotent(store, ctx):
    await store.put(ctx, ConfigDoc.blank(ConfigType.SETTINGS))

    await store.initialize()

    assert (await store.get_scoped_full_config(ctx, ConfigType.SETTINGS)).rev == 1
