"""Config document store adapters."""

from beacon.adapters.config_store.in_memory import InMemoryConfigStore
from beacon.adapters.config_store.sqlalchemy import SqlAlchemyConfigStore

__all__ = ["InMemoryConfigStore", "SqlAlchemyConfigStore"]
