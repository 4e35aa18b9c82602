"""
🔐 Session resolution

Turns a bearer token into a user id:
- JWT access tokens signed with AUTH_SECRET
- database session tokens from the session table
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt
from jose.exceptions import JWTError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.auth.schema import ProfileData
from hivechat.core.config import settings
from hivechat.models import AuthSession, User

logger = logging.getLogger(__name__)


def create_access_token(user: User, expires_hours: Optional[int] = None) -> str:
    """Issue a signed access token for a user"""
    hours = expires_hours or settings.JWT_ACCESS_TOKEN_EXPIRE_HOURS
    payload = {
        "sub": user.id,
        "user_id": user.id,
        "email": user.email,
        "name": user.name,
        "exp": datetime.now(timezone.utc) + timedelta(hours=hours),
    }
    return jwt.encode(payload, settings.AUTH_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """User id carried by a JWT, None if the token is invalid or expired"""
    try:
        payload = jwt.decode(
            token, settings.AUTH_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None
    return payload.get("user_id") or payload.get("sub")


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AuthService:
    """Session lookups"""

    async def resolve_user_id(
        self, token: Optional[str], session: AsyncSession
    ) -> Optional[str]:
        if not token:
            return None

        user_id = decode_access_token(token)
        if user_id:
            return user_id

        result = await session.exec(
            select(AuthSession).where(AuthSession.session_token == token)
        )
        auth_session = result.first()
        if auth_session is None:
            return None
        if _as_utc(auth_session.expires) <= datetime.now(timezone.utc):
            logger.info("expired session token rejected")
            return None
        return auth_session.user_id

    async def get_profile(
        self, user_id: str, session: AsyncSession
    ) -> Optional[ProfileData]:
        user = await session.get(User, user_id)
        if user is None:
            return None
        return ProfileData(
            id=user.id,
            name=user.name,
            email=user.email,
            image=user.image,
            is_admin=user.is_admin,
            group_id=user.group_id,
            created_at=user.created_at,
        )


auth_service = AuthService()
