"""
🔐 Authentication tables

Users plus the account / session / verification / passkey tables used by the
sign-in flows. Everything hanging off a user is removed with it.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from sqlmodel import DateTime, Field, Relationship

from hivechat.core.model import Base, CreatedAtBase


class User(CreatedAtBase, table=True):
    """Registered user"""

    __tablename__ = "user"

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36
    )
    name: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None, unique=True, index=True)
    password: Optional[str] = Field(default=None, description="password hash")

    # third-party identities
    dingding_union_id: Optional[str] = Field(default=None)
    wecom_user_id: Optional[str] = Field(default=None)
    feishu_user_id: Optional[str] = Field(default=None)
    feishu_open_id: Optional[str] = Field(default=None)
    feishu_union_id: Optional[str] = Field(default=None)

    email_verified: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True)  # type: ignore
    )
    is_admin: bool = Field(default=False)
    image: Optional[str] = Field(default=None)
    group_id: Optional[str] = Field(default=None, description="user group")

    accounts: List["Account"] = Relationship(
        back_populates="user", sa_relationship_kwargs={"cascade": "all, delete-orphan"}
    )
    sessions: List["AuthSession"] = Relationship(
        back_populates="user", sa_relationship_kwargs={"cascade": "all, delete-orphan"}
    )


class Account(Base, table=True):
    """OAuth / external provider account linked to a user"""

    __tablename__ = "account"

    provider: str = Field(primary_key=True)
    provider_account_id: str = Field(primary_key=True)

    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    type: str = Field(description="oauth / oidc / email / webauthn")
    refresh_token: Optional[str] = Field(default=None)
    access_token: Optional[str] = Field(default=None)
    expires_at: Optional[int] = Field(default=None)
    token_type: Optional[str] = Field(default=None)
    scope: Optional[str] = Field(default=None)
    id_token: Optional[str] = Field(default=None)
    session_state: Optional[str] = Field(default=None)

    user: Optional[User] = Relationship(back_populates="accounts")


class AuthSession(Base, table=True):
    """Database-backed login session"""

    __tablename__ = "session"

    session_token: str = Field(primary_key=True)
    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    expires: datetime = Field(sa_type=DateTime(timezone=True))  # type: ignore

    user: Optional[User] = Relationship(back_populates="sessions")


class VerificationToken(Base, table=True):
    __tablename__ = "verification_token"

    identifier: str = Field(primary_key=True)
    token: str = Field(primary_key=True)
    expires: datetime = Field(sa_type=DateTime(timezone=True))  # type: ignore


class Authenticator(Base, table=True):
    """WebAuthn credential"""

    __tablename__ = "authenticator"

    user_id: str = Field(foreign_key="user.id", ondelete="CASCADE", primary_key=True)
    credential_id: str = Field(primary_key=True, unique=True)
    provider_account_id: str
    credential_public_key: str
    counter: int
    credential_device_type: str
    credential_backed_up: bool
    transports: Optional[str] = Field(default=None)
