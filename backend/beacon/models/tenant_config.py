"""Tenant config document model."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from beacon.models._base import Base


class TenantConfig(Base):
    """One config document of one tenant."""

    __tablename__ = "tenant_config"

    tenant_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    config_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    config: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    rev: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    modified_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
