"""
Database session management with async SQLAlchemy 2.0.
The Database handle owns the engine and sessionmaker; it is built once at
startup, injected where needed, and disposed at shutdown.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from graybay.core.logging import get_logger
from graybay.db.base import Base

logger = get_logger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless this pragma is on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Persistence handle: engine, sessionmaker and transaction scopes."""

    def __init__(
        self,
        url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ):
        self.url = url
        self.engine: AsyncEngine = self._create_engine(url, echo, pool_size, max_overflow)
        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Sessionmaker created")

    @staticmethod
    def _create_engine(url: str, echo: bool, pool_size: int, max_overflow: int) -> AsyncEngine:
        """Create async SQLAlchemy engine with connection pooling."""
        backend = make_url(url).get_backend_name()

        if backend == "sqlite":
            # In-memory databases must share one connection across sessions
            kwargs = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in url or url.endswith("sqlite+aiosqlite://"):
                kwargs["poolclass"] = StaticPool
            engine = create_async_engine(url, echo=echo, **kwargs)
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            engine = create_async_engine(
                url,
                echo=echo,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,  # Verify connections before using
            )

        logger.info(
            "Database engine created",
            extra={
                "backend": backend,
                "pool_size": pool_size,
                "max_overflow": max_overflow,
            },
        )
        return engine

    async def create_all(self) -> None:
        """Create all tables registered on Base."""
        # Registers every model with Base.metadata
        import graybay.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created")

    async def drop_all(self) -> None:
        import graybay.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Session scope for one unit of work.
        Commits on success, rolls back on any exception.
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        """Close database connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """
    Run a multi-step write as one transaction.

    Every statement issued inside the block is committed together; on any
    exception the whole block is rolled back, so no partial state is ever
    visible to other sessions.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise


def get_database(request: Request) -> Database:
    """Return the Database handle attached to the running app."""
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database handle is not initialized")
    return database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database session.
    Yields a session and ensures it's closed after use.
    """
    database = get_database(request)
    async with database.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
