"""ConfigStore protocol for per-tenant config documents.

Every call receives the ``RequestContext`` whose ``tenant_id`` selects the
tenant's documents. Stores hand out copies: mutating a returned document
has no effect until it is passed to ``put``.

Writes are compare-and-swap on ``ConfigDoc.rev``: a document read at
revision N can only be written while the stored revision is still N
(``None`` meaning "does not exist yet"). A lost race raises
``ConfigConflictError`` and leaves the stored document unchanged.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from beacon.schemas.config import ConfigDoc, ConfigType

if TYPE_CHECKING:
    from beacon.core.context import RequestContext


@runtime_checkable
class ConfigStore(Protocol):
    """Document store for tenant configuration."""

    async def initialize(self) -> None:
        """Prepare backing storage. Called once at startup, before any read."""
        ...

    async def get_scoped_full_config(
        self, ctx: "RequestContext", config_type: ConfigType
    ) -> ConfigDoc:
        """Return the tenant's document of ``config_type``.

        A tenant with no stored document gets a blank, unsaved one
        (``rev is None``).
        """
        ...

    async def put(self, ctx: "RequestContext", doc: ConfigDoc) -> ConfigDoc:
        """Persist ``doc`` for the tenant and return it with its new revision.

        Raises:
            ConfigConflictError: If the stored revision differs from ``doc.rev``.
        """
        ...
