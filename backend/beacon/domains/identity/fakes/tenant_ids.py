"""Fake unique tenant id derivation."""

from beacon.core.context import RequestContext


class FakeUniqueTenantIds:
    """In-memory fake for UniqueTenantIdProtocol.

    Returns ``<prefix>_<tenant_id>`` and records every requested tenant.
    """

    def __init__(self, prefix: str = "unique") -> None:
        """Initialize with a fixed prefix."""
        self._prefix = prefix
        self.requested: list[str] = []

    async def get_unique_tenant_id(self, ctx: RequestContext, tenant_id: str) -> str:
        """Return the deterministic unique id."""
        self.requested.append(tenant_id)
        return f"{self._prefix}_{tenant_id}"
