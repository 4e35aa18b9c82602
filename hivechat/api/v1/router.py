from fastapi import APIRouter

from hivechat.app_settings.router import router as app_settings_router
from hivechat.auth.router import router as auth_router
from hivechat.chats.router import router as chats_router
from hivechat.core.config import settings
from hivechat.mcp.router import router as mcp_router
from hivechat.messages.router import router as messages_router
from hivechat.search.router import router as search_router

api_v1_router = APIRouter(prefix=settings.API_V1_STR)


api_v1_router.include_router(auth_router)
api_v1_router.include_router(chats_router)
api_v1_router.include_router(messages_router)
api_v1_router.include_router(app_settings_router)
api_v1_router.include_router(mcp_router)
api_v1_router.include_router(search_router)
