"""InstallationRegistry protocol."""

from typing import Protocol, runtime_checkable

from beacon.schemas.installation import Installation


@runtime_checkable
class InstallationRegistry(Protocol):
    """Source of the per-deployment installation record."""

    async def get_install(self) -> Installation:
        """Return this deployment's installation record."""
        ...
