"""Fan-out analytics sink.

Forwards each call to every configured processor in order. A failing
processor aborts the call and the error reaches the caller; processors
after it are not invoked for that call.
"""

from typing import Optional, Sequence

from beacon.core.protocols.analytics import AnalyticsSink, IdentifyPayload, Timestamp
from beacon.schemas.group import Group


class CompositeAnalyticsSink:
    """Implements AnalyticsSink over a sequence of sinks."""

    def __init__(self, sinks: Sequence[AnalyticsSink]) -> None:
        """Wrap ``sinks``; order is delivery order."""
        self._sinks = list(sinks)

    @property
    def sinks(self) -> list[AnalyticsSink]:
        """Configured processors, in delivery order."""
        return list(self._sinks)

    async def identify(
        self, identity: IdentifyPayload, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Forward to every processor."""
        for sink in self._sinks:
            await sink.identify(identity, timestamp)

    async def identify_group(self, group: Group, timestamp: Optional[Timestamp] = None) -> None:
        """Forward to every processor."""
        for sink in self._sinks:
            await sink.identify_group(group, timestamp)
