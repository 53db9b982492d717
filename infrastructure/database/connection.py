import logging
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from infrastructure.database.models import Base
from core.config.settings import settings

logger = logging.getLogger(__name__)

ASYNC_DATABASE_URL = settings.async_database_url

# SQLite için connect_args gerekli
connect_args = {"check_same_thread": False} if ASYNC_DATABASE_URL.startswith("sqlite") else {}
async_engine = create_async_engine(ASYNC_DATABASE_URL, connect_args=connect_args)

AsyncSessionLocal = sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    autocommit=False,
    autoflush=False
)


async def create_tables(engine=None):
    engine = engine or async_engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")
