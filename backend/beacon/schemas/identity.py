"""Identity schemas.

An identity is who or what an analytics event is attributed to. The three
shapes are mutually exclusive and discriminated on ``type``:

- installation: a whole deployment
- tenant: one workspace inside a deployment
- user: an individual person

For installation and tenant identities ``id`` is the formatted distinct id
(``$installation_<id>`` / ``$tenant_<id>``); for users it is the raw user id.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Hosting(str, Enum):
    """Who operates the deployment."""

    SELF = "self"
    CLOUD = "cloud"


class IdentityType(str, Enum):
    """Identity kinds."""

    INSTALLATION = "installation"
    TENANT = "tenant"
    USER = "user"


class _IdentityBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    hosting: Hosting
    installation_id: str


class InstallationIdentity(_IdentityBase):
    """A deployment acting as an analytics actor."""

    type: Literal[IdentityType.INSTALLATION] = IdentityType.INSTALLATION


class TenantIdentity(_IdentityBase):
    """A tenant acting as an analytics actor (background jobs, anonymous calls)."""

    type: Literal[IdentityType.TENANT] = IdentityType.TENANT
    tenant_id: str


class UserIdentity(_IdentityBase):
    """An individual user."""

    type: Literal[IdentityType.USER] = IdentityType.USER
    tenant_id: str
    verified: bool = False
    account_holder: bool = False
    provider_type: Optional[str] = None
    builder: bool = False
    admin: bool = False


Identity = Annotated[
    Union[InstallationIdentity, TenantIdentity, UserIdentity],
    Field(discriminator="type"),
]
