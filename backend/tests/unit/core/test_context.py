"""Tests for RequestContext and with_tenant."""

import pytest

from beacon.core.context import DEFAULT_TENANT_ID, IdentityContext, RequestContext, with_tenant
from beacon.core.logging import logger
from beacon.schemas.identity import IdentityType


def test_logger_carries_tenant_dimension():
    ctx = RequestContext("acme")

    assert ctx.logger.dimensions == {"tenant_id": "acme"}


def test_for_same_tenant_returns_same_context(ctx):
    assert ctx.for_tenant(DEFAULT_TENANT_ID) is ctx


def test_for_other_tenant_keeps_identity():
    identity = IdentityContext(IdentityType.USER, id="user-1")
    ctx = RequestContext("acme", identity=identity)

    scoped = ctx.for_tenant("other")

    assert scoped.tenant_id == "other"
    assert scoped.identity is identity
    assert scoped.logger.dimensions["tenant_id"] == "other"


@pytest.mark.asyncio
async def test_with_tenant_scopes_only_the_nested_call(ctx):
    seen = []

    async def _fn(inner):
        seen.append(inner.tenant_id)
        return "result"

    result = await with_tenant(ctx, "acme", _fn)

    assert result == "result"
    assert seen == ["acme"]
    assert ctx.tenant_id == DEFAULT_TENANT_ID


@pytest.mark.asyncio
async def test_with_tenant_leaves_caller_untouched_on_error(ctx):
    async def _fn(inner):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await with_tenant(ctx, "acme", _fn)

    assert ctx.tenant_id == DEFAULT_TENANT_ID
    assert ctx.logger.dimensions == {"tenant_id": DEFAULT_TENANT_ID}


def test_for_other_tenant_keeps_logger_dimensions():
    ctx = RequestContext("a", logger=logger.with_context(tenant_id="a", request_id="r1"))

    scoped = ctx.for_tenant("b")

    assert scoped.logger.dimensions == {"tenant_id": "b", "request_id": "r1"}
    assert ctx.logger.dimensions == {"tenant_id": "a", "request_id": "r1"}
