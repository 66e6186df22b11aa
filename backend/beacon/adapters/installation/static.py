"""Installation registry with a fixed record."""

from typing import Optional

from beacon.schemas.installation import Installation


class StaticInstallationRegistry:
    """Returns the same installation record on every call."""

    def __init__(self, install_id: str, version: Optional[str] = None) -> None:
        """Serve ``install_id`` (and ``version``)."""
        self._install = Installation(install_id=install_id, version=version)
        self.calls = 0

    async def get_install(self) -> Installation:
        """Return the fixed record."""
        self.calls += 1
        return self._install
