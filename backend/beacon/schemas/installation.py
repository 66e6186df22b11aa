"""Installation schema."""

from typing import Optional

from pydantic import BaseModel


class Installation(BaseModel):
    """One deployed instance of the system."""

    install_id: str
    version: Optional[str] = None
