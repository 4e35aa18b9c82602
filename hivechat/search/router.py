"""
🔍 Web search router
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.auth.dependency import get_session_user_id
from hivechat.core.database import get_session
from hivechat.core.schema import ActionResponse

from .schema import WebSearchRequest, WebSearchResponse
from .service import search_service

router = APIRouter(prefix="/search", tags=["🔍 web search"])


@router.post("", response_model=ActionResponse[WebSearchResponse])
async def get_search_result(
    request: WebSearchRequest,
    user_id: Optional[str] = Depends(get_session_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    🔍 Web search

    Uses the search engine the administrator marked as active.

    **Errors:**
    - 401 without a session
    - `status: error` when no engine is active or the provider fails
    """
    try:
        return await search_service.get_search_result(
            user_id=user_id, keyword=request.keyword, session=session
        )
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
