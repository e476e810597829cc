"""
Game Reviews Backend — Database Session Management
====================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   One process-wide engine owns the connection pool; each request gets
       its own session that commits on success and rolls back on error.
Who:   Route handlers receive sessions through FastAPI's Depends(); the
       services run their queries on them.
When:  Engine is created at module import; sessions are created per-request;
       the engine is disposed once at shutdown.

Connection Pooling:
    pool_size:        Persistent connections for normal load
    max_overflow:     Temporary connections for traffic spikes
    pool_pre_ping:    Validates connections before use
    pool_recycle=3600: Recycles connections every hour

    A connection is checked out only for the lifetime of the request's
    session and goes back to the pool when the session closes.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
def pool_options(database_url: str) -> Dict[str, Any]:
    """
    Sizing arguments for the engine's pool.

    SQLite (used by the test suite) gets NullPool/StaticPool from its
    dialect, and those pools reject size arguments.
    """
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_recycle": 3600,
    }


engine = create_async_engine(
    settings.database_url,
    pool_pre_ping=settings.db_pool_pre_ping,
    echo=settings.log_level == "DEBUG",
    **pool_options(settings.database_url),
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: response models are built from ORM objects after
# the dependency has committed
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    The tables themselves are owned by the external schema/seed scripts;
    the metadata is only used to map rows (and to build throwaway test
    databases).
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/users")
        async def get_users(db: AsyncSession = Depends(get_db_session)):
            return await user_service.list_users(db)
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


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes every pooled connection. Called from the lifespan shutdown."""
    await engine.dispose()
