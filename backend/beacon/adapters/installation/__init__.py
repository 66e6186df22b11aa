"""Installation registry adapters."""

from beacon.adapters.installation.file import FileInstallationRegistry
from beacon.adapters.installation.static import StaticInstallationRegistry

__all__ = ["FileInstallationRegistry", "StaticInstallationRegistry"]
