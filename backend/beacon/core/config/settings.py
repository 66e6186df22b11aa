"""Application settings loaded from the environment."""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from beacon import __version__
from beacon.core.config.enums import (
    CacheBackendType,
    ConfigStoreBackendType,
    DeploymentRole,
    Environment,
)


class Settings(BaseSettings):
    """Typed view over the process environment.

    Attributes:
    ----------
        ENVIRONMENT (Environment): Deployment environment.
        SELF_HOSTED (bool): Whether this deployment is operated by the customer.
        SERVICE (DeploymentRole): Role of the running service.
        APP_VERSION (str): Version reported on installation groups.
        ANALYTICS_ENABLED (bool): Whether analytics are shipped to PostHog.
        POSTHOG_API_KEY (str): PostHog project key.
        POSTHOG_HOST (str): PostHog ingestion host.
        ANALYTICS_LOG_EVENTS (bool): Also log every identify/group call.
        CACHE_BACKEND (CacheBackendType): TTL cache implementation.
        REDIS_HOST (str): Redis host.
        REDIS_PORT (int): Redis port.
        REDIS_DB (int): Redis database index.
        REDIS_PASSWORD (Optional[str]): Redis password.
        CONFIG_STORE_BACKEND (ConfigStoreBackendType): Config document store.
        DATABASE_URL (str): Async SQLAlchemy URL for the SQL config store.
        INSTALLATION_ID (Optional[str]): Fixed installation id override.
        INSTALLATION_ID_PATH (str): File holding the minted installation id.
        LOG_LEVEL (str): Root log level.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENVIRONMENT: Environment = Environment.LOCAL
    SELF_HOSTED: bool = False
    SERVICE: DeploymentRole = DeploymentRole.APPS
    APP_VERSION: str = __version__

    ANALYTICS_ENABLED: bool = True
    POSTHOG_API_KEY: str = ""
    POSTHOG_HOST: str = "https://us.i.posthog.com"
    ANALYTICS_LOG_EVENTS: bool = False

    CACHE_BACKEND: CacheBackendType = CacheBackendType.MEMORY
    REDIS_HOST: str = "localhost"
    REDIS_PORT: int = 6379
    REDIS_DB: int = 0
    REDIS_PASSWORD: Optional[str] = None

    CONFIG_STORE_BACKEND: ConfigStoreBackendType = ConfigStoreBackendType.MEMORY
    DATABASE_URL: str = "sqlite+aiosqlite:///./beacon.db"

    INSTALLATION_ID: Optional[str] = None
    INSTALLATION_ID_PATH: str = ".beacon/installation_id"

    LOG_LEVEL: str = "INFO"

    @field_validator("SERVICE", mode="before")
    @classmethod
    def normalize_service(cls, v: object) -> object:
        """Accept ``SERVICE`` values regardless of case or surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def analytics_active(self) -> bool:
        """Whether events should actually leave the process."""
        return (
            self.ANALYTICS_ENABLED
            and bool(self.POSTHOG_API_KEY)
            and self.ENVIRONMENT != Environment.LOCAL
        )
