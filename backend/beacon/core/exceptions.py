"""Shared exceptions module."""

from typing import Any, Optional


class BeaconException(Exception):
    """Base exception for Beacon services."""

    pass


class UnknownIdentityKindError(BeaconException):
    """Raised when the ambient identity context carries a kind outside the closed set.

    This is a contract violation by whoever populated the context, not a
    recoverable condition. It is never caught inside Beacon.
    """

    def __init__(self, kind: Any):
        """Create a new UnknownIdentityKindError instance.

        Args:
        ----
            kind: The offending identity kind value.

        """
        self.kind = kind
        self.message = f"Unknown identity type: {kind!r}"
        super().__init__(self.message)


class ConfigConflictError(BeaconException):
    """Raised when a config document write loses a revision check."""

    def __init__(
        self,
        tenant_id: str,
        config_id: str,
        expected_rev: Optional[int],
        message: Optional[str] = None,
    ):
        """Create a new ConfigConflictError instance.

        Args:
        ----
            tenant_id (str): Tenant owning the document.
            config_id (str): Document id.
            expected_rev (int, optional): Revision the writer based its change on.
            message (str, optional): The error message.

        """
        self.tenant_id = tenant_id
        self.config_id = config_id
        self.expected_rev = expected_rev
        self.message = message or (
            f"Config '{config_id}' for tenant '{tenant_id}' changed since revision {expected_rev}"
        )
        super().__init__(self.message)
