import logging
from contextlib import asynccontextmanager

import fastapi
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hivechat.api.v1.router import api_v1_router as v1_router
from hivechat.core.config import settings
from hivechat.core.database import init_db
from hivechat.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("service is started.")

    await init_db()

    yield

    logger.info("service is stopped.")


def create_app(init_database: bool = True) -> fastapi.FastAPI:
    setup_logging()

    app_instance = FastAPI(
        lifespan=lifespan if init_database else None,
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.PROJECT_VERSION,
        openapi_url="/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        redirect_slashes=False,
    )

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # health check
    @app_instance.get("/health")
    async def health_check():
        return {"status": "ok"}

    app_instance.include_router(v1_router)

    return app_instance


app = create_app()


if __name__ == "__main__":
    uvicorn.run("hivechat.main:app", port=8000, host="0.0.0.0", reload=True)
