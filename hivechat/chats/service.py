"""
💬 Chat service

Chat CRUD actions. Each action checks the session, runs one scoped statement
and answers with an ActionResponse envelope.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.core.schema import (
    ActionResponse,
    create_fail_response,
    create_login_required_response,
    create_success_response,
)
from hivechat.models import Chat

from .repository import chat_repository
from .schema import ChatCreate, ChatInfo, ChatUpdate

logger = logging.getLogger(__name__)

# columns that may not be patched to NULL
NON_NULLABLE_FIELDS = {
    "title",
    "history_type",
    "history_count",
    "is_star",
    "is_with_bot",
    "avatar_type",
}


class ChatService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_chat(
        self, user_id: Optional[str], chat_create: ChatCreate
    ) -> ActionResponse[ChatInfo]:
        """Create a chat owned by the caller"""
        if not user_id:
            return create_login_required_response()

        values = chat_create.model_dump(exclude_unset=True, exclude_none=True)
        try:
            chat = await chat_repository.create_chat(
                Chat(**values, user_id=user_id), self.session
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to create chat: {e}")
            return create_fail_response()

        if chat is None or chat.id is None:
            return create_fail_response()
        return create_success_response(data=ChatInfo.model_validate(chat))

    async def get_chat_info(
        self, user_id: Optional[str], chat_id: str
    ) -> ActionResponse[ChatInfo]:
        """Chat of the caller, fail with data=None when it does not exist"""
        if not user_id:
            return create_login_required_response()

        try:
            chat = await chat_repository.get_chat_by_id(
                chat_id, user_id, self.session
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to load chat {chat_id}: {e}")
            return create_fail_response()

        if chat is None:
            return create_fail_response()
        return create_success_response(data=ChatInfo.model_validate(chat))

    async def get_chat_list(
        self, user_id: Optional[str]
    ) -> ActionResponse[List[ChatInfo]]:
        """Caller's chats, newest first"""
        if not user_id:
            return create_login_required_response(data=[])

        try:
            chats = await chat_repository.get_chats_by_user(user_id, self.session)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to list chats of user {user_id}: {e}")
            return create_fail_response(data=[])
        return create_success_response(
            data=[ChatInfo.model_validate(chat) for chat in chats]
        )

    async def update_chat(
        self, user_id: Optional[str], chat_id: str, chat_update: ChatUpdate
    ) -> ActionResponse[None]:
        """Apply the keys present in the patch"""
        if not user_id:
            return create_login_required_response()

        values = {
            key: value
            for key, value in chat_update.model_dump(exclude_unset=True).items()
            if value is not None or key not in NON_NULLABLE_FIELDS
        }
        if not values:
            return create_success_response()

        try:
            await chat_repository.update_chat(chat_id, user_id, values, self.session)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to update chat {chat_id}: {e}")
            return create_fail_response()
        return create_success_response()

    async def update_chat_title(
        self, user_id: Optional[str], chat_id: str, title: str
    ) -> ActionResponse[None]:
        if not user_id:
            return create_login_required_response()

        try:
            await chat_repository.update_chat(
                chat_id, user_id, {"title": title}, self.session
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to rename chat {chat_id}: {e}")
            return create_fail_response()
        return create_success_response()

    async def delete_chat(
        self, user_id: Optional[str], chat_id: str
    ) -> ActionResponse[None]:
        """Delete the chat and the caller's messages in it"""
        if not user_id:
            return create_login_required_response()

        try:
            await chat_repository.delete_chat_with_messages(
                chat_id, user_id, self.session
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to delete chat {chat_id}: {e}")
            return create_fail_response()
        return create_success_response()

    async def delete_all_user_chats(
        self, user_id: Optional[str]
    ) -> ActionResponse[None]:
        if not user_id:
            return create_login_required_response()

        try:
            deleted = await chat_repository.delete_chats_by_user(user_id, self.session)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to delete chats of user {user_id}: {e}")
            return create_fail_response()
        logger.info(f"🗑️ deleted {deleted} chats of user {user_id}")
        return create_success_response()
