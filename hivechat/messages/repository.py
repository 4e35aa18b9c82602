"""
✉️ Message repository
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, update
from sqlmodel import asc
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.core.model import utcnow
from hivechat.core.query_utils import create_soft_delete_query_with_conditions
from hivechat.models import Message


class MessageRepository:
    async def create_message(self, message: Message, session: AsyncSession) -> Message:
        session.add(message)
        await session.commit()
        await session.refresh(message)
        return message

    async def get_message_by_id(
        self, message_id: int, user_id: str, session: AsyncSession
    ) -> Optional[Message]:
        query = create_soft_delete_query_with_conditions(
            Message, id=message_id, user_id=user_id
        )
        result = await session.exec(query)
        return result.first()

    async def get_messages_by_chat(
        self, chat_id: str, user_id: str, session: AsyncSession
    ) -> List[Message]:
        """Oldest first"""
        query = create_soft_delete_query_with_conditions(
            Message, chat_id=chat_id, user_id=user_id
        ).order_by(asc(Message.created_at), asc(Message.id))
        result = await session.exec(query)
        return list(result.all())

    async def update_mcp_tools(
        self,
        message_id: int,
        user_id: str,
        mcp_tools: List[Dict[str, Any]],
        session: AsyncSession,
    ) -> int:
        stmt = (
            update(Message)
            .where(Message.id == message_id, Message.user_id == user_id)
            .values(mcp_tools=mcp_tools, updated_at=utcnow())
        )
        result = await session.execute(stmt)
        await session.commit()
        return result.rowcount

    async def soft_delete_message(
        self, message_id: int, user_id: str, session: AsyncSession
    ) -> bool:
        message = await self.get_message_by_id(message_id, user_id, session)
        if message:
            message.soft_delete()
            message.touch()
            await session.commit()
            return True
        return False

    async def delete_messages_by_chat(
        self, chat_id: str, user_id: str, session: AsyncSession
    ) -> int:
        result = await session.execute(
            delete(Message).where(Message.chat_id == chat_id, Message.user_id == user_id)
        )
        await session.commit()
        return result.rowcount


message_repository = MessageRepository()
