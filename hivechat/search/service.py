"""
🔍 Web search service

Proxies a keyword to the active search engine.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.core.schema import (
    ActionResponse,
    create_error_response,
    create_success_response,
)
from hivechat.external_services.web_search import WebSearchClient, web_search_client
from hivechat.models import SearchEngineConfig

from .schema import SearchEngineSettings, WebSearchResponse

logger = logging.getLogger(__name__)

SEARCH_NOT_CONFIGURED_MESSAGE = "search is not configured by the administrator"


class SearchService:
    """Web search service"""

    def __init__(self, client: WebSearchClient = web_search_client):
        self.client = client

    async def get_active_engine(
        self, session: AsyncSession
    ) -> Optional[SearchEngineConfig]:
        result = await session.exec(
            select(SearchEngineConfig).where(SearchEngineConfig.is_active == True)  # noqa: E712
        )
        return result.first()

    async def get_search_result(
        self, user_id: Optional[str], keyword: str, session: AsyncSession
    ) -> ActionResponse[WebSearchResponse]:
        """
        Search with the active engine

        Anonymous callers are rejected with a 401; every other failure is
        reported in the envelope.
        """
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"message": "not allowed", "code": "NOT_ALLOWED"},
            )

        try:
            config = await self.get_active_engine(session)
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"❌ failed to load search engine config: {e}")
            return create_error_response(message=SEARCH_NOT_CONFIGURED_MESSAGE)

        if config is None:
            return create_error_response(message=SEARCH_NOT_CONFIGURED_MESSAGE)

        # a stored limit below 1 falls back to the default
        max_results = config.max_results if (config.max_results or 0) > 0 else 5
        engine = SearchEngineSettings(
            id=config.id,
            name=config.name,
            api_key=config.api_key,
            max_results=max_results,
        )
        try:
            result = await self.client.search(engine, keyword)
        except Exception as e:
            logger.error(f"❌ web search failed: {e}")
            return create_error_response(message=str(e) or "Unknown error")

        return create_success_response(data=result, message="success")


search_service = SearchService()
