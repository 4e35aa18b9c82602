"""
💬 Chat repository

Every statement is scoped to the owning user.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, update
from sqlmodel import desc, select
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.core.model import utcnow
from hivechat.models import Chat, Message


class ChatRepository:
    """Chat repository"""

    async def create_chat(self, chat: Chat, session: AsyncSession) -> Chat:
        session.add(chat)
        await session.commit()
        await session.refresh(chat)
        return chat

    async def get_chat_by_id(
        self, chat_id: str, user_id: str, session: AsyncSession
    ) -> Optional[Chat]:
        query = select(Chat).where(Chat.id == chat_id, Chat.user_id == user_id)
        result = await session.exec(query)
        return result.first()

    async def get_chats_by_user(
        self, user_id: str, session: AsyncSession
    ) -> List[Chat]:
        """Newest first"""
        query = (
            select(Chat)
            .where(Chat.user_id == user_id)
            .order_by(desc(Chat.created_at))
        )
        result = await session.exec(query)
        return list(result.all())

    async def update_chat(
        self,
        chat_id: str,
        user_id: str,
        values: Dict[str, Any],
        session: AsyncSession,
    ) -> int:
        """Patch the given columns; returns the number of rows touched"""
        stmt = (
            update(Chat)
            .where(Chat.id == chat_id, Chat.user_id == user_id)
            .values(**values, updated_at=utcnow())
        )
        result = await session.execute(stmt)
        await session.commit()
        return result.rowcount

    async def delete_chat_with_messages(
        self, chat_id: str, user_id: str, session: AsyncSession
    ) -> int:
        """Delete a chat and the owner's messages in it in one transaction"""
        result = await session.execute(
            delete(Chat).where(Chat.id == chat_id, Chat.user_id == user_id)
        )
        await session.execute(
            delete(Message).where(Message.chat_id == chat_id, Message.user_id == user_id)
        )
        await session.commit()
        return result.rowcount

    async def delete_chats_by_user(self, user_id: str, session: AsyncSession) -> int:
        """Delete every chat and message of a user in one transaction"""
        result = await session.execute(delete(Chat).where(Chat.user_id == user_id))
        await session.execute(delete(Message).where(Message.user_id == user_id))
        await session.commit()
        return result.rowcount


chat_repository = ChatRepository()
