"""Async SQLAlchemy engine, session dependency and declarative Base.

The tables are written by the task service; this application only reads
them. The engine is built on first use so importing models or the app does
not require a database.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings, get_settings
from app.domain.exceptions import SqlNotConfiguredException

logger = logging.getLogger(__name__)

engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    pass


def _engine_options(settings: Settings) -> dict[str, Any]:
    options: dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_recycle": 3600,
    }
    if "asyncpg" in settings.database_url:
        options["connect_args"] = {"command_timeout": settings.db_command_timeout}
    return options


def _ensure_engine() -> None:
    """Build the engine and session factory once; no-op without DATABASE_URL."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    if not settings.database_url:
        return
    engine = create_async_engine(settings.database_url, **_engine_options(settings))
    AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Request-scoped read session. Nothing is committed."""
    _ensure_engine()
    if AsyncSessionLocal is None:
        logger.error("Dashboard query requested but DATABASE_URL is not set")
        raise SqlNotConfiguredException()
    async with AsyncSessionLocal() as session:
        yield session


async def dispose_engine() -> None:
    """Close pooled connections; the next get_db() builds a fresh engine."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
