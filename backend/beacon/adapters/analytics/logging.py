"""Analytics sink that writes every call to the log."""

from typing import Optional

from beacon.core.logging import ContextualLogger
from beacon.core.protocols.analytics import IdentifyPayload, Timestamp
from beacon.schemas.group import Group


class LoggingAnalyticsSink:
    """Logs identify and group calls at INFO; ships nothing."""

    def __init__(self, logger: ContextualLogger) -> None:
        """Log through ``logger`` tagged as the analytics processor."""
        self._logger = logger.with_context(component="analytics")

    async def identify(
        self, identity: IdentifyPayload, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Log the identity."""
        self._logger.info(
            f"identify type={identity.type.value} id={identity.id} timestamp={timestamp}"
        )

    async def identify_group(self, group: Group, timestamp: Optional[Timestamp] = None) -> None:
        """Log the group."""
        self._logger.info(
            f"identify_group type={group.type.value} id={group.id} timestamp={timestamp}"
        )
