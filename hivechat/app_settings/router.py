from fastapi import APIRouter, Depends, HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.core.database import get_session
from hivechat.core.schema import (
    ActionResponse,
    create_fail_response,
    create_success_response,
)

from .service import app_setting_service

router = APIRouter(prefix="/app-settings", tags=["⚙️ app settings"])


@router.get("/{key}", response_model=ActionResponse[str])
async def fetch_app_setting(
    key: str,
    session: AsyncSession = Depends(get_session),
):
    """
    ⚙️ Read one app setting
    """
    try:
        value = await app_setting_service.fetch_app_setting(key, session)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    if value is None:
        return create_fail_response()
    return create_success_response(data=value)
