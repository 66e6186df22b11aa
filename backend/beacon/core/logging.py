"""Logging setup.

Everything logs through ``ContextualLogger``: a ``LoggerAdapter`` that carries
key/value dimensions (tenant, request, component) and attaches them both to
the rendered message and to ``record.__dict__`` for structured handlers.

Usage:
    from beacon.core.logging import logger

    tenant_logger = logger.with_context(tenant_id="default")
    tenant_logger.info("Minted unique tenant id")
"""

import logging
import sys
from typing import Any, Mapping, MutableMapping, Optional

from beacon.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter with immutable context dimensions."""

    def __init__(self, logger: logging.Logger, dimensions: Optional[Mapping[str, Any]] = None):
        """Wrap ``logger`` with the given dimensions."""
        self.dimensions: dict[str, Any] = dict(dimensions or {})
        super().__init__(logger, self.dimensions)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        """Merge dimensions into ``extra`` and prefix the message with them."""
        kwargs["extra"] = {**self.dimensions, **(kwargs.get("extra") or {})}
        if self.dimensions:
            rendered = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
            msg = f"[{rendered}] {msg}"
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with ``dimensions`` added to the current ones."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions})


def _configure(level: str) -> logging.Logger:
    base = logging.getLogger("beacon")
    if not base.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        base.addHandler(handler)
    base.setLevel(level.upper())
    return base


logger = ContextualLogger(_configure(settings.LOG_LEVEL))
