"""AnalyticsSink protocol: where identify/group calls end up.

The sink is the boundary between identity resolution and the analytics
provider (PostHog today). Delivery, batching and retries are the sink's
business; identification code only hands over fully built records.

Usage:
    await sink.identify(identity, timestamp)
    await sink.identify_group(group, timestamp)
"""

from datetime import datetime
from typing import Optional, Protocol, Union, runtime_checkable

from beacon.schemas.group import Group
from beacon.schemas.identity import Identity

# Optional event time. Strings are ISO-8601, numbers are epoch milliseconds.
Timestamp = Union[datetime, str, int, float]

# Payload accepted by ``identify``: a real identity, or a group re-labelled
# with its formatted distinct id so the provider can merge the two.
IdentifyPayload = Union[Identity, Group]


@runtime_checkable
class AnalyticsSink(Protocol):
    """Accepts identify and group calls and ships them."""

    async def identify(
        self, identity: IdentifyPayload, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Attach properties to the actor with ``identity.id``.

        Args:
            identity: Record describing the actor.
            timestamp: Event time; ``None`` means now.
        """
        ...

    async def identify_group(self, group: Group, timestamp: Optional[Timestamp] = None) -> None:
        """Attach properties to the group ``(group.type, group.id)``.

        Args:
            group: Record describing the group.
            timestamp: Event time; ``None`` means now.
        """
        ...
