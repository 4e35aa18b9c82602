"""
✉️ Message schemas
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from hivechat.core.schema import SchemaBase
from hivechat.models.enums import MessageType


class TextContentPart(SchemaBase):
    type: Literal["text"] = "text"
    text: str


class ImageContentPart(SchemaBase):
    type: Literal["image"] = "image"
    mime_type: str = Field(..., description="e.g. image/png")
    data: str = Field(..., description="base64 payload or url")


MessageContent = Union[str, List[Union[TextContentPart, ImageContentPart]]]


class McpToolResponse(SchemaBase):
    """Result of one MCP tool call attached to a message"""

    id: str = Field(..., description="tool call id")
    tool: Dict[str, Any] = Field(
        default_factory=dict, description="tool definition (name, serverName, ...)"
    )
    arguments: Optional[Dict[str, Any]] = Field(None, description="call arguments")
    status: Literal["pending", "invoking", "done", "error"] = "pending"
    response: Optional[Any] = Field(None, description="raw tool output")


class McpToolsSyncRequest(SchemaBase):
    mcp_tools: List[McpToolResponse] = Field(default_factory=list)


class MessageCreate(SchemaBase):
    """New message turn"""

    role: str = Field(..., max_length=255, description="user / assistant / system")
    content: MessageContent = Field(..., description="text or content parts")
    reasonin_content: Optional[str] = Field(None, description="reasoning trace")
    model: Optional[str] = Field(None, max_length=255)
    provider_id: str = Field(..., max_length=255)
    type: MessageType = MessageType.text
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None
    mcp_tools: Optional[List[McpToolResponse]] = None


class MessageInfo(SchemaBase):
    id: int
    chat_id: str
    role: str
    content: Optional[Any] = None
    reasonin_content: Optional[str] = None
    model: Optional[str] = None
    provider_id: str
    type: str = MessageType.text.value
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None
    mcp_tools: Optional[List[Dict[str, Any]]] = None
    created_at: Optional[datetime] = None
