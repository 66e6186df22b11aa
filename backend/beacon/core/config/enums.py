"""Configuration enums for type-safe settings.

These enums provide type safety and IDE autocomplete for configuration values.
They inherit from str to maintain JSON serialization compatibility.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments.

    Controls environment-specific behavior like logging and whether
    analytics are shipped.
    """

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"


class DeploymentRole(str, Enum):
    """Role of the running service within a deployment.

    Resolved once from the ``SERVICE`` variable at startup and handed to
    the components that care about it.
    """

    APPS = "apps"
    WORKER = "worker"
    ACCOUNT_PORTAL = "account-portal"


class CacheBackendType(str, Enum):
    """TTL cache backends."""

    MEMORY = "memory"
    REDIS = "redis"


class ConfigStoreBackendType(str, Enum):
    """Per-tenant config document store backends."""

    MEMORY = "memory"
    SQL = "sql"
