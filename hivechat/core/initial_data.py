import logging

from sqlmodel import select

logger = logging.getLogger(__name__)

# === default user group ===
DEFAULT_GROUP = {
    "name": "Default group",
    "is_default": True,
}

# === default app settings ===
DEFAULT_APP_SETTINGS = {
    "isRegistrationOpen": "true",
    "historyCount": "5",
}


async def insert_default_group(session):
    """Create the default user group if there is none"""
    from hivechat.models import Group
    from hivechat.models.enums import GroupModelType

    result = await session.exec(select(Group).where(Group.is_default == True))  # noqa: E712
    if result.first():
        logger.info("✅ default group already exists")
        return

    session.add(Group(**DEFAULT_GROUP, model_type=GroupModelType.all))
    await session.commit()
    logger.info("✅ default group created")


async def insert_default_app_settings(session):
    """Insert missing default settings; existing values are kept"""
    from hivechat.models import AppSetting

    result = await session.exec(
        select(AppSetting.key).where(AppSetting.key.in_(list(DEFAULT_APP_SETTINGS)))
    )
    existing = set(result.all())

    missing = [key for key in DEFAULT_APP_SETTINGS if key not in existing]
    for key in missing:
        session.add(AppSetting(key=key, value=DEFAULT_APP_SETTINGS[key]))
    if missing:
        await session.commit()
        logger.info(f"✅ {len(missing)} default app settings inserted")


async def insert_all_initial_data(session):
    """Insert all initial data"""
    await insert_default_group(session)
    await insert_default_app_settings(session)
