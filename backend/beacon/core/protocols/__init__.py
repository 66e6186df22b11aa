"""Core protocols for dependency injection.

Domain-specific protocols live in their domains/ directories. This module
keeps the cross-cutting infrastructure ports only.
"""

from beacon.core.protocols.analytics import AnalyticsSink, IdentifyPayload, Timestamp
from beacon.core.protocols.cache import Producer, TTLCache
from beacon.core.protocols.config_store import ConfigStore
from beacon.core.protocols.installation import InstallationRegistry

__all__ = [
    "AnalyticsSink",
    "ConfigStore",
    "IdentifyPayload",
    "InstallationRegistry",
    "Producer",
    "TTLCache",
    "Timestamp",
]
