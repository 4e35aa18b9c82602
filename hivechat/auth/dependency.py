from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.auth.service import auth_service
from hivechat.core.database import get_session

# HTTP Bearer scheme; a missing header means an anonymous caller
oauth2_scheme = HTTPBearer(auto_error=False)


async def get_session_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(oauth2_scheme),
    session: AsyncSession = Depends(get_session),
) -> Optional[str]:
    """
    Id of the logged-in user, or None

    Actions decide for themselves how to answer anonymous callers.
    """
    token = credentials.credentials if credentials else None
    return await auth_service.resolve_user_id(token, session)


async def get_current_user_id(
    user_id: Optional[str] = Depends(get_session_user_id),
) -> str:
    """Id of the logged-in user; 401 for anonymous callers"""
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": "please login first.", "code": "NOT_AUTHENTICATED"},
        )
    return user_id
