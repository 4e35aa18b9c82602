from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.auth.dependency import get_current_user_id
from hivechat.auth.schema import ProfileData
from hivechat.auth.service import auth_service
from hivechat.core.database import get_session
from hivechat.core.schema import ActionResponse, create_success_response

router = APIRouter(prefix="/auth", tags=["🔐 auth"])


@router.get("/me", response_model=ActionResponse[ProfileData])
async def get_profile(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    👤 Current user profile
    """
    profile = await auth_service.get_profile(user_id, session)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": "user not found", "code": "USER_NOT_FOUND"},
        )
    return create_success_response(data=profile)
