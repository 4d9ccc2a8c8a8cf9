# database.py
import logging
from typing import AsyncIterator

from fastapi import Request
from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine (and so the connection pool) for the process."""

    def __init__(self, url: str, echo: bool = False):
        self.engine = create_async_engine(url, echo=echo, future=True, pool_pre_ping=True)

        # Session factory for creating new async sessions
        self.session_factory = sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_db_and_tables(self):
        """Initializes the database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def dispose(self):
        """Closes every pooled connection."""
        await self.engine.dispose()
        logger.info("Database connection pool closed")


async def get_async_session(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: one session per request, closed when it finishes."""
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        yield session
