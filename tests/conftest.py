"""
Pytest configuration and shared fixtures

Provides:
- an in-memory SQLite database per test, tables created from the models
- an async session bound to it
- sample users, chats and messages
- an HTTP client against the FastAPI app with the session overridden
"""

import os

# must be set before hivechat.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from datetime import datetime, timedelta  # noqa: E402
from typing import AsyncGenerator, List  # noqa: E402

import httpx  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

import hivechat.models  # noqa: E402,F401  registers the tables
from hivechat.models import Chat, Message, User  # noqa: E402

OWNER_ID = "user-owner"
OTHER_ID = "user-other"


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine shared by every session of a test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def users(db_session) -> List[User]:
    owner = User(id=OWNER_ID, name="Owner", email="owner@example.com")
    other = User(id=OTHER_ID, name="Other", email="other@example.com")
    db_session.add_all([owner, other])
    await db_session.commit()
    return [owner, other]


@pytest_asyncio.fixture
async def owner_chats(db_session) -> List[Chat]:
    """Three chats of the owner created a minute apart, oldest first"""
    base = datetime(2024, 5, 1, 12, 0, 0)
    chats = [
        Chat(
            id=f"chat{i:06d}",
            user_id=OWNER_ID,
            title=f"chat {i}",
            created_at=base + timedelta(minutes=i),
        )
        for i in range(3)
    ]
    db_session.add_all(chats)
    await db_session.commit()
    return chats


@pytest_asyncio.fixture
async def other_chat(db_session) -> Chat:
    chat = Chat(id="otherchat1", user_id=OTHER_ID, title="not yours")
    db_session.add(chat)
    await db_session.commit()
    return chat


def make_message(chat_id: str, user_id: str = OWNER_ID, **kwargs) -> Message:
    values = {
        "role": "user",
        "content": "hello",
        "provider_id": "openai",
        "model": "gpt-4o-mini",
    }
    values.update(kwargs)
    return Message(chat_id=chat_id, user_id=user_id, **values)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client against the app, using the test database"""
    from hivechat.core.database import get_session
    from hivechat.main import create_app

    app = create_app(init_database=False)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def auth_headers(user_id: str = OWNER_ID) -> dict:
    from hivechat.auth.service import create_access_token

    token = create_access_token(User(id=user_id, name="tester", email=None))
    return {"Authorization": f"Bearer {token}"}
