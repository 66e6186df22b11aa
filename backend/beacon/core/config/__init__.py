"""Configuration module for the Beacon backend.

Provides centralized configuration management with type-safe enums.

Usage:
    from beacon.core.config import settings, DeploymentRole

    if settings.SERVICE == DeploymentRole.ACCOUNT_PORTAL:
        ...
"""

from beacon.core.config.enums import (
    CacheBackendType,
    ConfigStoreBackendType,
    DeploymentRole,
    Environment,
)
from beacon.core.config.settings import Settings

__all__ = [
    "CacheBackendType",
    "ConfigStoreBackendType",
    "DeploymentRole",
    "Environment",
    "Settings",
    "settings",
]

# Singleton settings instance
settings = Settings()
