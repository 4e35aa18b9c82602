"""
📊 Application tables

Chats and messages are scoped to their owner through user_id. Provider ->
model, server -> tool and group/model links cascade on delete; chats and
messages are linked only by chat_id and cleaned up explicitly.
"""

import secrets
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlmodel import JSON, DateTime, Field, Relationship, Text

from hivechat.core.model import (
    Base,
    CreatedAtBase,
    SoftDeleteMixin,
    TimestampBase,
)
from hivechat.models.enums import (
    ApiStyle,
    AvatarType,
    GroupModelType,
    HistoryType,
    MessageType,
    ModelType,
    ProviderType,
)

CHAT_ID_ALPHABET = "1234567890abcdefghijklmnopqrstuvwxyz"
CHAT_ID_LENGTH = 10


def generate_chat_id() -> str:
    return "".join(secrets.choice(CHAT_ID_ALPHABET) for _ in range(CHAT_ID_LENGTH))


class LlmProvider(TimestampBase, table=True):
    """LLM provider settings (one row per provider)"""

    __tablename__ = "llm_settings"

    provider: str = Field(primary_key=True, max_length=255)
    provider_name: str = Field(max_length=255)
    apikey: Optional[str] = Field(default=None, max_length=255)
    endpoint: Optional[str] = Field(default=None, max_length=1024)
    is_active: bool = Field(default=False)
    api_style: ApiStyle = Field(default=ApiStyle.openai)
    type: ProviderType = Field(default=ProviderType.default)
    logo: Optional[str] = Field(default=None, max_length=2048)
    order: Optional[int] = Field(default=None)

    models: List["LlmModel"] = Relationship(
        back_populates="provider",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class LlmModel(TimestampBase, table=True):
    """Model offered by a provider; names are unique per provider"""

    __table_args__ = (
        UniqueConstraint("name", "provider_id", name="unique_model_provider"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    display_name: str = Field(max_length=255)
    max_tokens: Optional[int] = Field(default=None)
    support_vision: bool = Field(default=False)
    support_tool: bool = Field(default=False)
    selected: bool = Field(default=True)

    provider_id: str = Field(
        sa_column=Column(
            String(255),
            ForeignKey(
                "llm_settings.provider", ondelete="CASCADE", onupdate="CASCADE"
            ),
            nullable=False,
        )
    )
    provider_name: str = Field(max_length=255)
    type: ModelType = Field(default=ModelType.default)
    order: int = Field(default=1)

    provider: Optional[LlmProvider] = Relationship(back_populates="models")


class AppSetting(TimestampBase, table=True):
    """Key/value application setting"""

    key: str = Field(primary_key=True)
    value: Optional[str] = Field(default=None, sa_column=Column(Text))


class Chat(TimestampBase, table=True):
    """Conversation owned by one user"""

    id: str = Field(default_factory=generate_chat_id, primary_key=True)
    user_id: Optional[str] = Field(default=None, index=True)
    title: str = Field(max_length=255)
    history_type: HistoryType = Field(default=HistoryType.count)
    history_count: int = Field(default=5)

    # one default model/provider pair per chat
    default_model: Optional[str] = Field(default=None)
    default_provider: Optional[str] = Field(default=None)

    is_star: bool = Field(default=False)
    is_with_bot: bool = Field(default=False)
    bot_id: Optional[int] = Field(default=None)
    avatar: Optional[str] = Field(default=None)
    avatar_type: AvatarType = Field(default=AvatarType.none)
    prompt: Optional[str] = Field(default=None, sa_column=Column(Text))
    star_at: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True)  # type: ignore
    )


class Message(TimestampBase, SoftDeleteMixin, table=True):
    """One turn of a chat, optionally carrying MCP tool results"""

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(index=True)
    chat_id: str = Field(index=True)
    role: str = Field(max_length=255)
    content: Union[str, List[Dict[str, Any]], None] = Field(
        default=None, sa_column=Column(JSON)
    )
    reasonin_content: Optional[str] = Field(default=None, sa_column=Column(Text))
    model: Optional[str] = Field(default=None, max_length=255)
    provider_id: str = Field(max_length=255)
    message_type: str = Field(default=MessageType.text.value)
    input_tokens: Optional[int] = Field(default=None)
    output_tokens: Optional[int] = Field(default=None)
    total_tokens: Optional[int] = Field(default=None)
    error_type: Optional[str] = Field(default=None)
    error_message: Optional[str] = Field(default=None)
    mcp_tools: Optional[List[Dict[str, Any]]] = Field(
        default=None, sa_column=Column(JSON)
    )


class Bot(TimestampBase, SoftDeleteMixin, table=True):
    """Preset assistant a chat can be started with"""

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=255)
    prompt: Optional[str] = Field(default=None, max_length=10000)
    avatar_type: AvatarType = Field(default=AvatarType.none)
    avatar: Optional[str] = Field(default=None)
    source_url: Optional[str] = Field(default=None)
    creator: Optional[str] = Field(default=None)


class Group(TimestampBase, table=True):
    """User group; model access is either all models or a specific list"""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    name: str
    model_type: GroupModelType = Field(default=GroupModelType.all)
    is_default: bool = Field(default=False)


class GroupModel(Base, table=True):
    """Models available to a group with model_type=specific"""

    group_id: str = Field(foreign_key="groups.id", ondelete="CASCADE", primary_key=True)
    model_id: int = Field(
        foreign_key="llm_models.id", ondelete="CASCADE", primary_key=True
    )


class McpServer(CreatedAtBase, table=True):
    """Registered MCP tool provider"""

    name: str = Field(primary_key=True)
    description: Optional[str] = Field(default=None)
    base_url: str
    is_active: bool = Field(default=False)

    tools: List["McpTool"] = Relationship(
        back_populates="server",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class McpTool(Base, table=True):
    """Tool exposed by exactly one MCP server"""

    name: str = Field(primary_key=True)
    server_name: str = Field(
        foreign_key="mcp_servers.name", ondelete="CASCADE", primary_key=True
    )
    description: Optional[str] = Field(default=None)
    input_schema: str = Field(sa_column=Column(Text, nullable=False))

    server: Optional[McpServer] = Relationship(back_populates="tools")


class SearchEngineConfig(Base, table=True):
    """Web search provider credentials; at most one is expected to be active"""

    __tablename__ = "search_engine_config"

    id: str = Field(primary_key=True, description="engine id: tavily / jina / bocha")
    name: str
    api_key: Optional[str] = Field(default=None)
    max_results: int = Field(default=5)
    extract_keywords: bool = Field(default=False)
    is_active: bool = Field(default=False)
