import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# load .env
load_dotenv()


class Settings(BaseSettings):
    # API
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "HiveChat API Server"
    PROJECT_DESCRIPTION: str = "Chat, message, MCP and web search data access for HiveChat"
    PROJECT_VERSION: str = "0.1.0"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",  # web development
        "https://chat.hivechat.net",  # web production
    ]

    # database
    DATABASE_HOST: str = os.getenv("DATABASE_HOST", "")
    DATABASE_PORT: str = os.getenv("DATABASE_PORT", "")
    DATABASE_USER: str = os.getenv("DATABASE_USER", "")
    DATABASE_PASSWORD: str = os.getenv("DATABASE_PASSWORD", "")
    DATABASE_NAME: str = os.getenv("DATABASE_NAME", "")
    DATABASE_ECHO: bool = False

    # session tokens
    AUTH_SECRET: str = os.getenv(
        "AUTH_SECRET", "your-super-secret-key-for-local-development-only"
    )
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_HOURS: int = 24 * 7

    # web search providers
    SEARCH_TIMEOUT: float = 30.0
    TAVILY_API_URL: str = "https://api.tavily.com"
    JINA_SEARCH_URL: str = "https://s.jina.ai"
    BOCHA_API_URL: str = "https://api.bochaai.com"

    LOG_LEVEL: str = "INFO"

    @property
    def DATABASE_URL(self) -> str:
        """Use DATABASE_URL from the environment if set, otherwise build it from the parts"""
        env_database_url = os.getenv("DATABASE_URL")
        if env_database_url:
            return env_database_url

        return f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        extra="ignore",  # ignore unknown variables
    )


settings = Settings()
