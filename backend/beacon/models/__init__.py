"""SQLAlchemy models."""

from beacon.models._base import Base
from beacon.models.tenant_config import TenantConfig

__all__ = ["Base", "TenantConfig"]
