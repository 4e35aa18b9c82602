from fastapi import APIRouter, Depends, HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.core.database import get_session

from .schema import McpCatalog
from .service import mcp_service

router = APIRouter(prefix="/mcp", tags=["🔧 MCP"])


@router.get("/catalog", response_model=McpCatalog)
async def get_mcp_servers_and_available_tools(
    session: AsyncSession = Depends(get_session),
):
    """
    🔧 Active MCP servers and their tools

    Database failures yield empty lists.
    """
    try:
        return await mcp_service.get_mcp_servers_and_available_tools(session)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
