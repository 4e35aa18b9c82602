"""
💬 Chat router

Chat CRUD. Anonymous callers get a fail envelope rather than a 401.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.auth.dependency import get_session_user_id
from hivechat.core.database import get_session
from hivechat.core.schema import ActionResponse

from .schema import ChatCreate, ChatInfo, ChatTitleUpdate, ChatUpdate
from .service import ChatService

router = APIRouter(prefix="/chats", tags=["💬 chats"])


@router.post("", response_model=ActionResponse[ChatInfo])
async def add_chat(
    chat_create: ChatCreate,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    💬 Create a chat

    Returns the stored chat, including the generated id.
    """
    try:
        return await ChatService(session).add_chat(user_id, chat_create)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("", response_model=ActionResponse[List[ChatInfo]])
async def get_chat_list(
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    💬 My chats, newest first
    """
    try:
        return await ChatService(session).get_chat_list(user_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("", response_model=ActionResponse[None])
async def delete_all_user_chats(
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    🗑️ Delete all my chats and their messages
    """
    try:
        return await ChatService(session).delete_all_user_chats(user_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{chat_id}", response_model=ActionResponse[ChatInfo])
async def get_chat_info(
    chat_id: str,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    try:
        return await ChatService(session).get_chat_info(user_id, chat_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{chat_id}", response_model=ActionResponse[None])
async def update_chat(
    chat_id: str,
    chat_update: ChatUpdate,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    ✏️ Patch chat settings

    Only the keys present in the body are changed.
    """
    try:
        return await ChatService(session).update_chat(user_id, chat_id, chat_update)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{chat_id}/title", response_model=ActionResponse[None])
async def update_chat_title(
    chat_id: str,
    title_update: ChatTitleUpdate,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    try:
        return await ChatService(session).update_chat_title(
            user_id, chat_id, title_update.title
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{chat_id}", response_model=ActionResponse[None])
async def delete_chat(
    chat_id: str,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    🗑️ Delete a chat

    The chat's messages are removed in the same transaction.
    """
    try:
        return await ChatService(session).delete_chat(user_id, chat_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
