"""Analytics sink adapters."""

from beacon.adapters.analytics.composite import CompositeAnalyticsSink
from beacon.adapters.analytics.logging import LoggingAnalyticsSink
from beacon.adapters.analytics.posthog import PostHogAnalyticsSink

__all__ = ["CompositeAnalyticsSink", "LoggingAnalyticsSink", "PostHogAnalyticsSink"]
