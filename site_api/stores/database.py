"""SQL store with async SQLAlchemy.

Handles:
- Engine and session lifecycle (explicit open/close, no module globals)
- Translating driver faults into StorageError
- One repository per entity
"""

import threading
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from site_api.errors import StorageError


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


def new_record_id() -> str:
    """Opaque store-assigned identifier."""
    return uuid4().hex


def _wall_clock() -> datetime:
    return datetime.now(timezone.utc)


_clock_lock = threading.Lock()
_last_timestamp: datetime | None = None


def utcnow() -> datetime:
    """Creation timestamp, strictly increasing within the process.

    Listings order by creation time, so two records created in the same
    microsecond get distinct timestamps in insertion order.
    """
    global _last_timestamp
    with _clock_lock:
        now = _wall_clock()
        if _last_timestamp is not None and now <= _last_timestamp:
            now = _last_timestamp + timedelta(microseconds=1)
        _last_timestamp = now
        return now


class RecordStore:
    """Owns the database engine and exposes per-entity repositories.

    Constructed by the application at startup and handed to route handlers
    through a dependency:

        store = RecordStore(settings.async_database_url)
        await store.open()
        ...
        await store.close()
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        # Imported here: models import Base from this module.
        from site_api.models import Appointment, BlogPost, Message, OpenHour
        from site_api.stores.repository import Repository

        self.database_url = database_url
        self.echo = echo
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

        self.appointments = Repository(self, Appointment)
        self.messages = Repository(self, Message)
        self.blogs = Repository(self, BlogPost)
        self.open_hours = Repository(self, OpenHour)

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    async def open(self) -> None:
        """Initialize database connection pool."""
        if self._engine is not None:
            return
        engine_kwargs: dict[str, object] = {"echo": self.echo}
        if not self.database_url.startswith("sqlite"):
            engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)
        self._engine = create_async_engine(self.database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def close(self) -> None:
        """Close database connection pool."""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None

    async def ping(self) -> None:
        """Run a trivial query to verify connectivity."""
        async with self.session() as session:
            await session.execute(text("SELECT 1"))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get database session context manager.

        Commits on clean exit, rolls back otherwise. Driver and ORM faults
        are re-raised as StorageError.

        Usage:
            async with store.session() as session:
                result = await session.execute(query)
        """
        if self._session_factory is None:
            raise RuntimeError("Record store not opened. Call open() first.")

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                raise StorageError(str(exc)) from exc
            except Exception:
                await session.rollback()
                raise

    async def create_tables(self) -> None:
        """Create all tables (for development/testing only)."""
        if self._engine is None:
            raise RuntimeError("Record store not opened. Call open() first.")

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        """Drop all tables (for testing only)."""
        if self._engine is None:
            raise RuntimeError("Record store not opened. Call open() first.")

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
