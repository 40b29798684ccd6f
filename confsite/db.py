"""Database engine and session management."""

import logging
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from confsite.config import Settings
from confsite.models.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine and session factory for one application."""

    def __init__(self, url: str, echo: bool = False):
        engine_kwargs: dict = {"echo": echo}
        if url.startswith("sqlite"):
            # One shared connection so in-memory databases survive across sessions
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a database for the configured URL."""
        return cls(settings.database_url, echo=settings.app_debug)

    async def create_all(self) -> None:
        """Create all tables. Production schemas are managed by alembic."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def drop_all(self) -> None:
        """Drop all tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped session, committing on success."""
    database: Database = request.app.state.database
    async with database.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
