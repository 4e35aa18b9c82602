from datetime import datetime
from typing import Optional

from pydantic import Field

from hivechat.core.schema import SchemaBase


class ProfileData(SchemaBase):
    """Current user profile"""

    id: str = Field(..., description="user id")
    name: Optional[str] = Field(None, description="display name")
    email: Optional[str] = Field(None, description="email")
    image: Optional[str] = Field(None, description="avatar url")
    is_admin: bool = Field(False, description="administrator flag")
    group_id: Optional[str] = Field(None, description="user group")
    created_at: Optional[datetime] = Field(None, description="sign-up time")
