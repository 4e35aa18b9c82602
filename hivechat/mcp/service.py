"""
🔧 MCP catalogue

Tools are only offered while their server is active.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import asc, select
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.models import McpServer, McpTool

from .schema import McpCatalog, McpServerInfo, McpToolInfo

logger = logging.getLogger(__name__)


class McpService:
    async def get_mcp_servers_and_available_tools(
        self, session: AsyncSession
    ) -> McpCatalog:
        """Active servers by creation time, their tools by server name"""
        try:
            tools_query = (
                select(
                    McpTool.name,
                    McpTool.description,
                    McpTool.server_name,
                    McpTool.input_schema,
                )
                .join(McpServer, McpTool.server_name == McpServer.name)
                .where(McpServer.is_active == True)  # noqa: E712
                .order_by(asc(McpTool.server_name))
            )
            tool_rows = (await session.exec(tools_query)).all()

            servers_query = (
                select(McpServer)
                .where(McpServer.is_active == True)  # noqa: E712
                .order_by(asc(McpServer.created_at))
            )
            servers = (await session.exec(servers_query)).all()
        except SQLAlchemyError as e:
            logger.error(f"❌ failed to load MCP catalogue: {e}")
            return McpCatalog(tools=[], mcp_servers=[])

        return McpCatalog(
            tools=[
                McpToolInfo(
                    name=name,
                    description=description,
                    server_name=server_name,
                    input_schema=input_schema,
                )
                for name, description, server_name, input_schema in tool_rows
            ],
            mcp_servers=[McpServerInfo.model_validate(server) for server in servers],
        )


mcp_service = McpService()
