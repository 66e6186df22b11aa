"""Identity domain types and pure helpers.

No IO: everything here is deterministic and safe to call anywhere.
"""

from typing import Union

from beacon.schemas.identity import Hosting, IdentityType

ACCOUNT_PORTAL_INSTALLATION_ID = "account-portal"

# Identity kinds whose distinct id gets the group-linkage prefix.
_GROUP_LINKED_TYPES: frozenset[IdentityType] = frozenset(
    {IdentityType.INSTALLATION, IdentityType.TENANT}
)


def format_distinct_id(id: str, type: Union[IdentityType, str]) -> str:
    """Build the distinct id the analytics backend expects for ``type``.

    Installation and tenant ids become ``$<type>_<id>``, the convention the
    backend uses to tie a group to its auto-created actor. Any other kind is
    returned unchanged.

    >>> format_distinct_id("abc", IdentityType.TENANT)
    '$tenant_abc'
    >>> format_distinct_id("abc", IdentityType.USER)
    'abc'
    """
    if type in _GROUP_LINKED_TYPES:
        return f"${IdentityType(type).value}_{id}"
    return id


def hosting_from_env(self_hosted: bool) -> Hosting:
    """Hosting mode implied by the deployment flag."""
    return Hosting.SELF if self_hosted else Hosting.CLOUD
