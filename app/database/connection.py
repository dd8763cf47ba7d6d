# app/database/connection.py
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy import MetaData, event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from config.appconfig import settings

logger = logging.getLogger(__name__)

# Deterministic constraint names so violations and DDL dumps are readable
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Base class for all models
Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES / ON DELETE CASCADE unless switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; SQLite connections get foreign key enforcement."""
    async_engine = create_async_engine(database_url, echo=echo, future=True)
    if make_url(database_url).get_backend_name() == "sqlite":
        event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return async_engine


def make_session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps rows readable after commit without lazy IO
    return async_sessionmaker(async_engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

# Session factory
AsyncSessionLocal = make_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield one session per unit of work and always close it.

    Usage:
        async for db in get_db():
            patient = await get_patient(db, 1)
    """
    async with AsyncSessionLocal() as db:
        try:
            yield db
        finally:
            await db.close()


async def init_db(target: Optional[AsyncEngine] = None) -> None:
    """Create every table registered on Base.metadata."""
    # Make sure all models are imported so their tables are on the metadata
    import app.model_registry  # noqa: F401

    target = target or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"✅ Tables created: {', '.join(Base.metadata.tables)}")


async def drop_db(target: Optional[AsyncEngine] = None) -> None:
    """Drop every table registered on Base.metadata."""
    import app.model_registry  # noqa: F401

    target = target or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Tables dropped")
