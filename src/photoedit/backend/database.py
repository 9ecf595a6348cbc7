"""Database engine and session factory"""
import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

# Import all models to ensure they are registered with SQLModel
from .model import Image, AIOperation, Project  # noqa: F401

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign key enforcement for every new SQLite connection

    SQLite ignores FOREIGN KEY clauses (including ON DELETE CASCADE) unless
    the pragma is set per connection.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create async database engine

    Args:
        database_url: SQLAlchemy async URL (e.g. sqlite+aiosqlite:///path/to.db)
        echo: Log emitted SQL statements

    Returns:
        AsyncEngine instance
    """
    engine = create_async_engine(
        database_url,
        echo=echo,
        future=True,
    )

    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.debug(f"Database engine created: dialect={engine.dialect.name}")
    return engine


def create_session_factory(engine: AsyncEngine) -> sessionmaker:
    """Create async session factory bound to the engine"""
    return sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_db_and_tables(engine: AsyncEngine) -> None:
    """Create all tables (and the named enum types on PostgreSQL)"""
    logger.info("Creating database tables...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Failed to create database tables: {e}")
        raise
