"""
💬 Chat schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hivechat.core.schema import SchemaBase
from hivechat.models.enums import AvatarType, HistoryType


class ChatCreate(SchemaBase):
    """New chat; only title is required"""

    title: str = Field(..., max_length=255, description="chat title")
    default_model: Optional[str] = Field(None, description="default model name")
    default_provider: Optional[str] = Field(None, description="default provider id")
    history_type: Optional[HistoryType] = Field(None, description="all / count / none")
    history_count: Optional[int] = Field(None, ge=0, description="messages kept as context")
    is_star: Optional[bool] = Field(None, description="starred")
    is_with_bot: Optional[bool] = Field(None, description="started from a bot")
    bot_id: Optional[int] = Field(None, description="bot id")
    avatar: Optional[str] = Field(None, description="emoji or url")
    avatar_type: Optional[AvatarType] = Field(None, description="emoji / url / none")
    prompt: Optional[str] = Field(None, description="system prompt")


class ChatUpdate(SchemaBase):
    """Partial chat patch; absent keys are left untouched"""

    title: Optional[str] = Field(None, max_length=255)
    default_model: Optional[str] = None
    default_provider: Optional[str] = None
    history_type: Optional[HistoryType] = None
    history_count: Optional[int] = Field(None, ge=0)
    is_star: Optional[bool] = None
    is_with_bot: Optional[bool] = None
    bot_id: Optional[int] = None
    avatar: Optional[str] = None
    avatar_type: Optional[AvatarType] = None
    prompt: Optional[str] = None
    star_at: Optional[datetime] = None


class ChatTitleUpdate(SchemaBase):
    title: str = Field(..., max_length=255, description="new title")


class ChatInfo(SchemaBase):
    """Chat as returned to its owner"""

    id: str
    title: Optional[str] = None
    default_model: Optional[str] = None
    default_provider: Optional[str] = None
    history_type: Optional[HistoryType] = None
    history_count: Optional[int] = None
    is_star: Optional[bool] = None
    is_with_bot: Optional[bool] = None
    bot_id: Optional[int] = None
    avatar: Optional[str] = None
    avatar_type: Optional[AvatarType] = None
    prompt: Optional[str] = None
    created_at: Optional[datetime] = None
    star_at: Optional[datetime] = None

    class Config:
        from_attributes = True
