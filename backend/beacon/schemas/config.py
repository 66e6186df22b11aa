"""Per-tenant configuration documents.

Each tenant owns a set of config documents keyed by ``ConfigType``. The
settings document carries ``unique_tenant_id`` which, once written, is the
tenant's globally unique analytics id for the lifetime of the deployment.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ConfigType(str, Enum):
    """Config document kinds."""

    SETTINGS = "settings"


def config_id_for(config_type: ConfigType) -> str:
    """Document id for a config type (one document per type and tenant)."""
    return f"config_{config_type.value}"


class SettingsConfig(BaseModel):
    """Body of the settings document.

    Unknown fields written by other components are kept on round trip.
    """

    model_config = ConfigDict(extra="allow")

    platform_url: Optional[str] = None
    company: Optional[str] = None
    unique_tenant_id: Optional[str] = None


class ConfigDoc(BaseModel):
    """Persisted config envelope.

    ``rev`` is ``None`` for a document that has never been stored; stores
    bump it on every successful write and reject writes based on a stale one.
    """

    id: str
    type: ConfigType
    rev: Optional[int] = None
    config: SettingsConfig

    @classmethod
    def blank(cls, config_type: ConfigType) -> "ConfigDoc":
        """Unsaved document of the given type with an empty body."""
        return cls(id=config_id_for(config_type), type=config_type, config=SettingsConfig())
