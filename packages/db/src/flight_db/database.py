"""Async database engine and session configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .models import Base

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)

engine: AsyncEngine | None = None
async_session_factory: async_sessionmaker[AsyncSession] | None = None


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine, sizing the pool for server databases only."""
    options: dict[str, Any] = {"echo": echo}
    if not url.startswith("sqlite"):
        options.update(pool_size=20, max_overflow=10, pool_pre_ping=True)
    return create_async_engine(url, **options)


def init_db(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create the shared engine and session factory."""
    global engine, async_session_factory
    engine = build_engine(url, echo=echo)
    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info("Database engine initialised: %s", engine.url.render_as_string())
    return engine


async def close_db() -> None:
    """Dispose of the shared engine."""
    global engine, async_session_factory
    if engine is not None:
        await engine.dispose()
        engine = None
        async_session_factory = None
        logger.info("Database engine disposed")


async def create_tables(target: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet."""
    target = target or engine
    if target is None:
        msg = "Database engine has not been initialised"
        raise RuntimeError(msg)
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession]:
    """Yield a session that commits on success and rolls back on error."""
    if async_session_factory is None:
        msg = "Database engine has not been initialised"
        raise RuntimeError(msg)
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
