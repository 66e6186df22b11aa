"""Group schemas.

Groups link many individual identities under a shared entity. ``id`` is the
raw (unformatted) installation or tenant id.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from beacon.schemas.identity import Hosting, IdentityType


class InstallationGroup(BaseModel):
    """All activity of one deployment."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal[IdentityType.INSTALLATION] = IdentityType.INSTALLATION
    hosting: Hosting
    version: str


class TenantGroup(BaseModel):
    """All activity of one tenant."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal[IdentityType.TENANT] = IdentityType.TENANT
    hosting: Hosting
    installation_id: str
    profession: Optional[str] = None
    company_size: Optional[str] = None


Group = Annotated[Union[InstallationGroup, TenantGroup], Field(discriminator="type")]
