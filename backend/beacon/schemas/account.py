"""User and account schemas consumed by identification."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from beacon.schemas.identity import Hosting


class AuthType(str, Enum):
    """How an account authenticates."""

    PASSWORD = "password"
    SSO = "sso"


class User(BaseModel):
    """A platform user inside a tenant."""

    id: str
    tenant_id: str
    email: Optional[str] = None
    builder: bool = False
    admin: bool = False
    provider_type: Optional[str] = None


class Account(BaseModel):
    """A billing/sign-up account.

    ``platform_user_id`` links a cloud account to the platform user it
    created, so both converge on one analytics identity.
    """

    account_id: str
    tenant_id: str
    email: Optional[str] = None
    hosting: Hosting
    verified: bool = False
    auth_type: AuthType = AuthType.PASSWORD
    provider_type: Optional[str] = None
    profession: Optional[str] = None
    size: Optional[str] = None
    platform_user_id: Optional[str] = None

    @property
    def is_cloud(self) -> bool:
        """Whether the account belongs to the vendor-operated cloud."""
        return self.hosting == Hosting.CLOUD

    @property
    def is_sso(self) -> bool:
        """Whether the account signs in through an SSO provider."""
        return self.auth_type == AuthType.SSO
