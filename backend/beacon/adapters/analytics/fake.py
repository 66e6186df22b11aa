"""Fake analytics sink for testing."""

from dataclasses import dataclass
from typing import Any, Optional

from beacon.core.protocols.analytics import IdentifyPayload, Timestamp
from beacon.schemas.group import Group


@dataclass
class SinkCall:
    """Single recorded sink call."""

    method: str
    payload: Any
    timestamp: Optional[Timestamp]


class FakeAnalyticsSink:
    """In-memory test double for AnalyticsSink.

    Records every call in order for assertions.

    Usage:
        sink = FakeAnalyticsSink()
        service = IdentificationService(sink=sink, ...)
        await service.identify_installation_group("inst-1")
        assert sink.methods() == ["identify_group", "identify"]
    """

    def __init__(self, fail_with: Optional[Exception] = None) -> None:
        """Initialize with an empty call log.

        Args:
            fail_with: If set, every call records itself and then raises this.
        """
        self.calls: list[SinkCall] = []
        self._fail_with = fail_with

    async def identify(
        self, identity: IdentifyPayload, timestamp: Optional[Timestamp] = None
    ) -> None:
        """Record the identify call."""
        self.calls.append(SinkCall("identify", identity, timestamp))
        if self._fail_with is not None:
            raise self._fail_with

    async def identify_group(self, group: Group, timestamp: Optional[Timestamp] = None) -> None:
        """Record the group call."""
        self.calls.append(SinkCall("identify_group", group, timestamp))
        if self._fail_with is not None:
            raise self._fail_with

    def methods(self) -> list[str]:
        """Names of the recorded calls, in order."""
        return [c.method for c in self.calls]

    def get_all(self, method: str) -> list[SinkCall]:
        """Return all recorded calls of ``method``."""
        return [c for c in self.calls if c.method == method]

    def get(self, method: str) -> SinkCall:
        """Return the first call of ``method``, or raise AssertionError."""
        for c in self.calls:
            if c.method == method:
                return c
        raise AssertionError(f"No '{method}' call recorded. Recorded: {self.methods()}")
