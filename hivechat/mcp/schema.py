from datetime import datetime
from typing import List, Optional

from pydantic import Field

from hivechat.core.schema import SchemaBase


class McpToolInfo(SchemaBase):
    name: str
    description: Optional[str] = None
    server_name: str
    input_schema: str = Field(..., description="JSON schema of the tool input")


class McpServerInfo(SchemaBase):
    name: str
    description: Optional[str] = None
    base_url: str
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class McpCatalog(SchemaBase):
    """Active MCP servers and the tools they expose"""

    tools: List[McpToolInfo] = Field(default_factory=list)
    mcp_servers: List[McpServerInfo] = Field(default_factory=list)
