"""
✉️ Message service

Message persistence and MCP tool-result sync.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.chats.repository import chat_repository
from hivechat.core.schema import (
    ActionResponse,
    create_fail_response,
    create_login_required_response,
    create_success_response,
)
from hivechat.models import Message

from .repository import message_repository
from .schema import McpToolResponse, MessageCreate, MessageInfo

logger = logging.getLogger(__name__)

TOOLS_SAVED_MESSAGE = "tool results saved"
TOOLS_SYNC_FAILED_MESSAGE = "failed to sync tools"


def to_message_info(message: Message) -> MessageInfo:
    return MessageInfo(
        id=message.id,
        chat_id=message.chat_id,
        role=message.role,
        content=message.content,
        reasonin_content=message.reasonin_content,
        model=message.model,
        provider_id=message.provider_id,
        type=message.message_type,
        input_tokens=message.input_tokens,
        output_tokens=message.output_tokens,
        total_tokens=message.total_tokens,
        error_type=message.error_type,
        error_message=message.error_message,
        mcp_tools=message.mcp_tools,
        created_at=message.created_at,
    )


class MessageService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def sync_mcp_tools(
        self,
        user_id: Optional[str],
        message_id: int,
        mcp_tools: List[McpToolResponse],
    ) -> ActionResponse[None]:
        """Replace the tool results stored on one of the caller's messages"""
        if not user_id:
            return create_login_required_response()

        payload = [
            tool.model_dump(mode="json", by_alias=True) for tool in mcp_tools
        ]
        try:
            updated = await message_repository.update_mcp_tools(
                message_id, user_id, payload, self.session
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to sync MCP tool results: {e}")
            return create_fail_response(message=TOOLS_SYNC_FAILED_MESSAGE)

        if not updated:
            return create_fail_response(message=TOOLS_SYNC_FAILED_MESSAGE)
        return create_success_response(message=TOOLS_SAVED_MESSAGE)

    async def add_message(
        self, user_id: Optional[str], chat_id: str, message_create: MessageCreate
    ) -> ActionResponse[MessageInfo]:
        """Append a message to one of the caller's chats"""
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
            return create_fail_response(message="chat not found")

        content = message_create.content
        if not isinstance(content, str):
            content = [part.model_dump(by_alias=True) for part in content]
        mcp_tools = None
        if message_create.mcp_tools is not None:
            mcp_tools = [
                tool.model_dump(mode="json", by_alias=True)
                for tool in message_create.mcp_tools
            ]

        message = Message(
            user_id=user_id,
            chat_id=chat_id,
            role=message_create.role,
            content=content,
            reasonin_content=message_create.reasonin_content,
            model=message_create.model,
            provider_id=message_create.provider_id,
            message_type=message_create.type.value,
            input_tokens=message_create.input_tokens,
            output_tokens=message_create.output_tokens,
            total_tokens=message_create.total_tokens,
            error_type=message_create.error_type,
            error_message=message_create.error_message,
            mcp_tools=mcp_tools,
        )
        try:
            message = await message_repository.create_message(message, self.session)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to save message in chat {chat_id}: {e}")
            return create_fail_response()
        return create_success_response(data=to_message_info(message))

    async def get_messages_in_chat(
        self, user_id: Optional[str], chat_id: str
    ) -> ActionResponse[List[MessageInfo]]:
        if not user_id:
            return create_login_required_response(data=[])

        try:
            messages = await message_repository.get_messages_by_chat(
                chat_id, user_id, self.session
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to list messages of chat {chat_id}: {e}")
            return create_fail_response(data=[])
        return create_success_response(data=[to_message_info(m) for m in messages])

    async def delete_message(
        self, user_id: Optional[str], message_id: int
    ) -> ActionResponse[None]:
        """Soft delete"""
        if not user_id:
            return create_login_required_response()

        try:
            deleted = await message_repository.soft_delete_message(
                message_id, user_id, self.session
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to delete message {message_id}: {e}")
            return create_fail_response()

        if not deleted:
            return create_fail_response()
        return create_success_response()

    async def clear_messages_in_chat(
        self, user_id: Optional[str], chat_id: str
    ) -> ActionResponse[None]:
        if not user_id:
            return create_login_required_response()

        try:
            await message_repository.delete_messages_by_chat(
                chat_id, user_id, self.session
            )
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"❌ failed to clear messages of chat {chat_id}: {e}")
            return create_fail_response()
        return create_success_response()
