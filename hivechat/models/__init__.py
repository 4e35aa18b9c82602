"""
📊 Database models

SQLModel table definitions
"""

from .auth import Account, Authenticator, AuthSession, User, VerificationToken
from .entities import (
    AppSetting,
    Bot,
    Chat,
    Group,
    GroupModel,
    LlmModel,
    LlmProvider,
    McpServer,
    McpTool,
    Message,
    SearchEngineConfig,
)

__all__ = [
    "User",
    "Account",
    "AuthSession",
    "VerificationToken",
    "Authenticator",
    "LlmProvider",
    "LlmModel",
    "AppSetting",
    "Chat",
    "Message",
    "Bot",
    "Group",
    "GroupModel",
    "McpServer",
    "McpTool",
    "SearchEngineConfig",
]
