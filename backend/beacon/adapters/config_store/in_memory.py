"""In-memory config store.

Documents live in a dict keyed by ``(tenant_id, config_id)``. Reads and
writes hand out deep copies so callers never share state with the store,
and a rejected write leaves the stored document exactly as it was.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional

from beacon.core.exceptions import ConfigConflictError
from beacon.schemas.config import ConfigDoc, ConfigType, config_id_for

if TYPE_CHECKING:
    from beacon.core.context import RequestContext


class InMemoryConfigStore:
    """In-memory implementation of the ConfigStore protocol."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._docs: dict[tuple[str, str], ConfigDoc] = {}
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Nothing to prepare."""

    async def get_scoped_full_config(
        self, ctx: "RequestContext", config_type: ConfigType
    ) -> ConfigDoc:
        """Return a copy of the tenant's document, or a blank unsaved one."""
        async with self._lock:
            stored = self._docs.get((ctx.tenant_id, config_id_for(config_type)))
            if stored is None:
                return ConfigDoc.blank(config_type)
            return stored.model_copy(deep=True)

    async def put(self, ctx: "RequestContext", doc: ConfigDoc) -> ConfigDoc:
        """Store ``doc`` if its revision is current and return the stored copy."""
        async with self._lock:
            key = (ctx.tenant_id, doc.id)
            current = self._docs.get(key)
            current_rev = current.rev if current is not None else None
            if doc.rev != current_rev:
                raise ConfigConflictError(ctx.tenant_id, doc.id, doc.rev)

            stored = doc.model_copy(deep=True, update={"rev": (current_rev or 0) + 1})
            self._docs[key] = stored
            return stored.model_copy(deep=True)

    def stored(self, tenant_id: str, config_type: ConfigType) -> Optional[ConfigDoc]:
        """Peek at the stored document without copying. For diagnostics and tests."""
        return self._docs.get((tenant_id, config_id_for(config_type)))
