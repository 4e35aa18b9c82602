"""
✉️ Message router
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.auth.dependency import get_session_user_id
from hivechat.core.database import get_session
from hivechat.core.schema import ActionResponse

from .schema import McpToolsSyncRequest, MessageCreate, MessageInfo
from .service import MessageService

router = APIRouter(tags=["✉️ messages"])


@router.get("/chats/{chat_id}/messages", response_model=ActionResponse[List[MessageInfo]])
async def get_messages_in_chat(
    chat_id: str,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    ✉️ Messages of a chat, oldest first
    """
    try:
        return await MessageService(session).get_messages_in_chat(user_id, chat_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/chats/{chat_id}/messages", response_model=ActionResponse[MessageInfo])
async def add_message(
    chat_id: str,
    message_create: MessageCreate,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    try:
        return await MessageService(session).add_message(
            user_id, chat_id, message_create
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/chats/{chat_id}/messages", response_model=ActionResponse[None])
async def clear_messages_in_chat(
    chat_id: str,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    try:
        return await MessageService(session).clear_messages_in_chat(user_id, chat_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/messages/{message_id}", response_model=ActionResponse[None])
async def delete_message(
    message_id: int,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    try:
        return await MessageService(session).delete_message(user_id, message_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/messages/{message_id}/mcp-tools", response_model=ActionResponse[None])
async def sync_mcp_tools(
    message_id: int,
    request: McpToolsSyncRequest,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    🔧 Save MCP tool results on a message

    Replaces whatever tool results the message carried before.
    """
    try:
        return await MessageService(session).sync_mcp_tools(
            user_id, message_id, request.mcp_tools
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
