"""Fake config store for testing races and failures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from beacon.adapters.config_store.in_memory import InMemoryConfigStore
from beacon.schemas.config import ConfigDoc, ConfigType

if TYPE_CHECKING:
    from beacon.core.context import RequestContext


class FakeConfigStore(InMemoryConfigStore):
    """InMemoryConfigStore with call counting and failure injection.

    Usage:
        store = FakeConfigStore()
        store.fail_puts_with = ConnectionError("db down")
        store.before_put = concurrent_writer   # runs before the revision check
    """

    def __init__(self) -> None:
        """Initialize with no hooks."""
        super().__init__()
        self.get_calls = 0
        self.put_calls = 0
        self.fail_puts_with: Optional[Exception] = None
        self.before_put: Optional[Callable[["RequestContext", ConfigDoc], Awaitable[None]]] = None

    async def get_scoped_full_config(
        self, ctx: "RequestContext", config_type: ConfigType
    ) -> ConfigDoc:
        """Count and delegate."""
        self.get_calls += 1
        return await super().get_scoped_full_config(ctx, config_type)

    async def put(self, ctx: "RequestContext", doc: ConfigDoc) -> ConfigDoc:
        """Count, run hooks, then delegate."""
        self.put_calls += 1
        if self.before_put is not None:
            hook, self.before_put = self.before_put, None
            await hook(ctx, doc)
        if self.fail_puts_with is not None:
            raise self.fail_puts_with
        return await super().put(ctx, doc)

    async def seed(self, ctx: "RequestContext", doc: ConfigDoc) -> ConfigDoc:
        """Store ``doc`` directly, bypassing counters and hooks."""
        return await super().put(ctx, doc)
