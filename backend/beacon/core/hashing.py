"""Random identifier primitives."""

from uuid import uuid4


def new_id() -> str:
    """Return a fresh random identifier (32 lowercase hex characters)."""
    return uuid4().hex
