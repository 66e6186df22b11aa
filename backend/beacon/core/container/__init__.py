"""Dependency Injection Container Module.

Usage:
------
    # Initialize at startup (call once), then run the async startup steps
    from beacon.core import container as container_module
    from beacon.core.container import initialize_container, prepare_container
    from beacon.core.config import settings
    initialize_container(settings)
    await prepare_container(container_module.container)

    # Use the global container after initialization
    service = container_module.container.identification_service

    # In tests (construct services directly with fakes, don't use global)
"""

from typing import TYPE_CHECKING

from beacon.core.container.container import Container
from beacon.core.container.factory import create_container, prepare_container

if TYPE_CHECKING:
    from beacon.core.config import Settings

__all__ = [
    "Container",
    "create_container",
    "container",
    "initialize_container",
    "prepare_container",
]


container: Container | None = None
"""Global container instance, set by ``initialize_container()``.

Do NOT import this in domain code. Domains receive dependencies
via constructor parameters, never by importing the container directly.
"""


def initialize_container(settings: "Settings") -> None:
    """Initialize the global container. Call once at startup.

    Raises:
        RuntimeError: If called more than once (container already initialized)
    """
    global container

    if container is not None:
        raise RuntimeError(
            "Container already initialized. "
            "initialize_container() should only be called once at startup."
        )

    container = create_container(settings)


def reset_container() -> None:
    """Reset the global container to None. For testing only."""
    global container
    container = None
