import asyncio
import logging
from typing import AsyncGenerator, List, Type

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel, text
from sqlmodel.ext.asyncio.session import AsyncSession

from hivechat.core.config import settings

logger = logging.getLogger(__name__)

async_engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

async_session_factory = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


def auto_discover_models() -> List[Type[SQLModel]]:
    """
    🔍 Collect every table model so that create_all sees them
    """
    from hivechat import models

    discovered = []
    for name in models.__all__:
        model_class = getattr(models, name)
        if isinstance(model_class, type) and hasattr(model_class, "__table__"):
            discovered.append(model_class)
            logger.debug(f"model registered: {model_class.__name__}")

    logger.info(f"🎯 {len(discovered)} models registered")
    return discovered


async def create_updated_at_triggers(conn) -> int:
    """Install a BEFORE UPDATE trigger keeping updated_at current (PostgreSQL only)"""
    await conn.execute(
        text("""
    CREATE OR REPLACE FUNCTION update_updated_at_column()
    RETURNS TRIGGER AS $$
    BEGIN
        NEW.updated_at = now();
        RETURN NEW;
    END;
    $$ LANGUAGE plpgsql;
    """)
    )

    table_names = []

    def collect_table_names(metadata):
        for table in metadata.tables.values():
            if "updated_at" in table.columns:
                table_names.append(table.name)

    await conn.run_sync(lambda sync_conn: collect_table_names(SQLModel.metadata))

    for table_name in table_names:
        await conn.execute(
            text(f'DROP TRIGGER IF EXISTS update_updated_at_trigger ON "{table_name}";')
        )
        await conn.execute(
            text(f"""
        CREATE TRIGGER update_updated_at_trigger
        BEFORE UPDATE ON "{table_name}"
        FOR EACH ROW
        EXECUTE FUNCTION update_updated_at_column();
        """)
        )

    return len(table_names)


async def init_db():
    """
    🛠️ Database initialisation

    Creates tables, installs the updated_at triggers and inserts the initial data.
    """
    max_retries = 2
    retry_interval = 2

    for attempt in range(max_retries):
        try:
            logger.info(f"🔗 connecting to database {attempt + 1}/{max_retries}")

            auto_discover_models()

            async with async_engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
                logger.info("🏗️ tables created")

                if conn.dialect.name == "postgresql":
                    count = await create_updated_at_triggers(conn)
                    logger.info(f"⏰ updated_at trigger installed on {count} tables")

            await insert_initial_data()

            logger.info("✅ database ready")
            break

        except Exception as e:
            logger.warning(
                f"❌ database connection failed ({attempt + 1}/{max_retries}): {e}"
            )
            if attempt == max_retries - 1:
                logger.error("🚨 giving up on database initialisation")
                raise
            await asyncio.sleep(retry_interval)


async def insert_initial_data():
    from hivechat.core.initial_data import insert_all_initial_data

    async with async_session_factory() as session:
        await insert_all_initial_data(session)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    🔗 Per-request database session
    """
    async with async_session_factory() as session:
        yield session
