"""
⚙️ App setting lookup
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.models import AppSetting

logger = logging.getLogger(__name__)


class AppSettingService:
    async def fetch_app_setting(self, key: str, session: AsyncSession) -> Optional[str]:
        """Value stored under key, None when the key is unknown or unreadable"""
        try:
            result = await session.exec(select(AppSetting).where(AppSetting.key == key))
            setting = result.first()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"❌ failed to read app setting {key}: {e}")
            return None
        return setting.value if setting else None


app_setting_service = AppSettingService()
