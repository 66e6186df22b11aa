"""Request context threaded through every identification call.

There is no hidden ambient state: whoever handles a request builds a
``RequestContext`` (tenant + optional identity + contextual logger) and
passes it down. Switching tenant for a nested operation goes through
``with_tenant``, which hands the nested call a derived context and leaves
the caller's untouched, whether the call succeeds or raises.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, TypeVar, Union

from beacon.core.logging import ContextualLogger
from beacon.schemas.account import Account
from beacon.schemas.identity import IdentityType

DEFAULT_TENANT_ID = "default"

T = TypeVar("T")


@dataclass(frozen=True)
class IdentityContext:
    """Who is acting in the current request.

    ``type`` is normally an ``IdentityType``; it is typed loosely because the
    value comes from whoever authenticated the request and is checked at
    resolution time.
    """

    type: Union[IdentityType, str]
    id: Optional[str] = None
    account: Optional[Account] = None


@dataclass
class RequestContext:
    """Tenant scope and identity of one unit of work.

    ``tenant_id`` is the only positional field. ``logger`` is keyword-only;
    when omitted it is derived from the tenant in __post_init__.
    """

    tenant_id: str
    identity: Optional[IdentityContext] = field(default=None, kw_only=True)
    logger: ContextualLogger = field(default=None, kw_only=True, repr=False)

    def __post_init__(self):
        """Derive a tenant-scoped logger if none was provided."""
        if self.logger is None:
            from beacon.core.logging import logger as base_logger

            self.logger = base_logger.with_context(tenant_id=self.tenant_id)

    def for_tenant(self, tenant_id: str) -> "RequestContext":
        """Return a copy of this context scoped to ``tenant_id``.

        The logger keeps every dimension of the current one; only
        ``tenant_id`` changes.
        """
        if tenant_id == self.tenant_id:
            return self
        return RequestContext(
            tenant_id,
            identity=self.identity,
            logger=self.logger.with_context(tenant_id=tenant_id),
        )


async def with_tenant(
    ctx: RequestContext,
    tenant_id: str,
    fn: Callable[[RequestContext], Awaitable[T]],
) -> T:
    """Run ``fn`` against a context scoped to ``tenant_id`` and return its result.

    The override is only visible inside ``fn``; ``ctx`` itself is never
    modified.
    """
    return await fn(ctx.for_tenant(tenant_id))
