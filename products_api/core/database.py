from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from products_api.core.config import settings
import products_api.models  # noqa: F401  registers tables on SQLModel.metadata
import logging

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict:
    # SQLite (local runs and tests) shares one connection; pool sizing only applies to server databases
    if database_url.startswith("sqlite"):
        return {"poolclass": StaticPool}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
    }


engine: AsyncEngine = create_async_engine(
    settings.database_url,
    echo=settings.log_level == "DEBUG",
    future=True,
    **_engine_options(settings.database_url),
)


def set_search_path(dbapi_connection, connection_record):
    logger.info("Setting search path to %s", settings.db_schema)
    cursor = dbapi_connection.cursor()
    cursor.execute(f"SET search_path TO {settings.db_schema}")
    cursor.close()


if engine.dialect.name == "postgresql":
    event.listen(engine.sync_engine, "connect", set_search_path)

async_session_maker = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def get_async_session() -> AsyncSession:
    """FastAPI dependency for getting database session"""
    async with async_session_maker() as session:
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database session error: {type(e).__name__}: {e}")
            raise
        finally:
            await session.close()


async def create_db_and_tables():
    logger.info("Creating database tables")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def close_db():
    await engine.dispose()
