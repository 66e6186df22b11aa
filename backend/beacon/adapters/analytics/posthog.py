"""PostHog analytics sink adapter."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import posthog

from beacon.core.config import Settings
from beacon.core.protocols.analytics import IdentifyPayload, Timestamp
from beacon.schemas.group import Group

logger = logging.getLogger(__name__)


def to_datetime(timestamp: Optional[Timestamp]) -> Optional[datetime]:
    """Normalise an event timestamp for the SDK.

    ``None`` stays ``None`` (the SDK stamps "now"). Numbers are epoch
    milliseconds, strings are ISO-8601.
    """
    if timestamp is None or isinstance(timestamp, datetime):
        return timestamp
    if isinstance(timestamp, (int, float)):
        return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)
    return datetime.fromisoformat(timestamp)


class PostHogAnalyticsSink:
    """Ships identify and group calls through the PostHog SDK.

    Identify calls become ``$identify`` events with ``$set`` properties;
    group calls go through ``posthog.group_identify``, which attributes them
    to the ``$<type>_<key>`` actor PostHog links to the group.
    Every payload is enriched with the deployment environment.
    """

    def __init__(self, settings: Settings) -> None:
        """Configure the PostHog SDK from application settings."""
        self._enabled = settings.analytics_active
        self._environment = settings.ENVIRONMENT.value

        if self._enabled:
            posthog.api_key = settings.POSTHOG_API_KEY
            posthog.host = settings.POSTHOG_HOST
            logger.info("PostHog analytics sink initialized (env=%s)", self._environment)
        else:
            logger.info("PostHog analytics sink disabled (env=%s)", self._environment)

    @property
    def enabled(self) -> bool:
        """Whether calls are actually sent."""
        return self._enabled

    def _properties(self, record: Any) -> Dict[str, Any]:
        props = record.model_dump(mode="json", exclude={"id"}, exclude_none=True)
        props["environment"] = self._environment
        return props

    async def identify(
        self, identity: IdentifyPayload, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Send ``$identify`` for ``identity.id``."""
        if not self._enabled:
            return

        try:
            posthog.capture(
                distinct_id=identity.id,
                event="$identify",
                properties={"$set": self._properties(identity)},
                timestamp=to_datetime(timestamp),
            )
        except Exception as e:
            logger.error("Failed to identify '%s': %s", identity.id, e)
            raise

    async def identify_group(self, group: Group, timestamp: Optional[Timestamp] = None) -> None:
        """Send ``$groupidentify`` for ``(group.type, group.id)``."""
        if not self._enabled:
            return

        group_type = group.type.value
        try:
            posthog.group_identify(
                group_type,
                group.id,
                properties=self._properties(group),
                timestamp=to_datetime(timestamp),
            )
        except Exception as e:
            logger.error("Failed to identify %s group '%s': %s", group_type, group.id, e)
            raise
