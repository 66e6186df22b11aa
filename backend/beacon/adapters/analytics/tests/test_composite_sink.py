"""Tests for CompositeAnalyticsSink and LoggingAnalyticsSink."""

import logging

import pytest

from beacon.adapters.analytics.composite import CompositeAnalyticsSink
from beacon.adapters.analytics.fake import FakeAnalyticsSink
from beacon.adapters.analytics.logging import LoggingAnalyticsSink
from beacon.core.logging import logger
from beacon.schemas.group import InstallationGroup
from beacon.schemas.identity import Hosting, InstallationIdentity

IDENTITY = InstallationIdentity(
    id="$installation_inst-1", hosting=Hosting.SELF, installation_id="inst-1"
)
GROUP = InstallationGroup(id="inst-1", hosting=Hosting.SELF, version="1.2.3")


@pytest.mark.asyncio
async def test_fans_out_in_order(fake_sink):
    first, second = fake_sink, FakeAnalyticsSink()
    sink = CompositeAnalyticsSink([first, second])

    await sink.identify(IDENTITY, 5)
    await sink.identify_group(GROUP)

    for fake in (first, second):
        assert fake.methods() == ["identify", "identify_group"]
        assert fake.calls[0].timestamp == 5


@pytest.mark.asyncio
async def test_failure_stops_fan_out_and_propagates():
    failing = FakeAnalyticsSink(fail_with=ConnectionError("down"))
    after = FakeAnalyticsSink()
    sink = CompositeAnalyticsSink([failing, after])

    with pytest.raises(ConnectionError):
        await sink.identify(IDENTITY)

    assert after.calls == []


@pytest.mark.asyncio
async def test_logging_sink_logs_calls(caplog):
    sink = LoggingAnalyticsSink(logger)

    with caplog.at_level(logging.INFO, logger="beacon"):
        await sink.identify(IDENTITY)
        await sink.identify_group(GROUP)

    assert "identify type=installation id=$installation_inst-1" in caplog.text
    assert "identify_group type=installation id=inst-1" in caplog.text
