"""SQLAlchemy 2.0 async database engine and session management.

MySQL 8.0+ (asyncmy) in deployment; any async SQLAlchemy URL (e.g. aiosqlite)
can be supplied through DB_URL for local runs and tests.
"""
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from urllib.parse import quote_plus

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from storyboarder.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def _engine_options(url: str) -> dict:
    """Pool health settings for server databases; SQLite keeps driver defaults."""
    if url.startswith("sqlite"):
        return {"echo": settings.DEBUG}
    return {
        "echo": settings.DEBUG,
        "pool_recycle": 3600,
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
        "connect_args": {"connect_timeout": 30},
    }


engine = create_async_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))


if settings.DATABASE_URL.startswith("sqlite"):

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        """SQLite ignores REFERENCES unless enabled per connection, unlike MySQL."""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all ORM models.

    Forces utf8mb4 charset so dialogue text with emoji survives MySQL.
    """

    __table_args__ = {
        "mysql_charset": "utf8mb4",
        "mysql_collate": "utf8mb4_unicode_ci",
    }


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DATETIME columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields an async database session.

    Every statement issued during the request runs in one transaction:
    committed on success, rolled back on any error.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Create the database (MySQL only, best-effort) and all tables from Base metadata.

    Called at startup when AUTO_CREATE_TABLES is enabled; deployments run
    Alembic migrations instead.
    """
    import storyboarder.models  # noqa: F401  — registers tables on Base.metadata

    if settings.DATABASE_URL.startswith("mysql") and not settings.DB_URL:
        admin_url = (
            f"mysql+asyncmy://{settings.DB_USER}:{quote_plus(settings.DB_PASSWORD)}"
            f"@{settings.DB_HOST}:{settings.DB_PORT}/?charset=utf8mb4"
        )
        admin_engine = create_async_engine(
            admin_url, echo=False,
            connect_args={"connect_timeout": 30},
        )
        try:
            async with admin_engine.begin() as conn:
                await conn.execute(text(
                    f"CREATE DATABASE IF NOT EXISTS `{settings.DB_NAME}` "
                    f"CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
                ))
        except Exception as e:
            logger.warning("Could not create database (may already exist): %s", e)
        finally:
            await admin_engine.dispose()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def close_db() -> None:
    """Dispose of the engine connection pool.

    Called at application shutdown.
    """
    await engine.dispose()
