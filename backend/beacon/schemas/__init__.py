"""Pydantic schemas shared across Beacon."""

from beacon.schemas.account import Account, AuthType, User
from beacon.schemas.config import ConfigDoc, ConfigType, SettingsConfig
from beacon.schemas.group import Group, InstallationGroup, TenantGroup
from beacon.schemas.identity import (
    Hosting,
    Identity,
    IdentityType,
    InstallationIdentity,
    TenantIdentity,
    UserIdentity,
)
from beacon.schemas.installation import Installation

__all__ = [
    "Account",
    "AuthType",
    "ConfigDoc",
    "ConfigType",
    "Group",
    "Hosting",
    "Identity",
    "IdentityType",
    "Installation",
    "InstallationGroup",
    "InstallationIdentity",
    "SettingsConfig",
    "TenantGroup",
    "TenantIdentity",
    "User",
    "UserIdentity",
]
