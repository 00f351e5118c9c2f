"""
Employee Directory — Database Session Management
==================================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       FastAPI session dependency.
Why:   Keeps connection and transaction lifecycle out of repositories and routes.
How:   One AsyncSession per request; commit on success, rollback on error.

Transaction ownership:
    Repositories only flush. The owner of the session decides when to commit:
    get_db_session() for HTTP requests, the fixtures for tests.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from employee_api.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **settings.engine_options())

# expire_on_commit=False: ORM objects stay readable after the request commits,
# which the response serializer relies on
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all ORM models; its metadata is what Alembic tracks."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the factory
        2. Yields it to the dependency chain (repository → service → route)
        3. On success: commits
        4. On any error: rolls back and re-raises for the exception handlers
        5. Always: closes the session (returns the connection to the pool)

    Tests replace this dependency through app.dependency_overrides to point
    the whole stack at an in-memory database.
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
async def create_tables() -> None:
    """
    Create any missing tables for the registered models.

    When:  Startup, if settings.db_create_tables is enabled.
    Why:   The embedded database starts empty; production schemas should come
           from Alembic instead.
    """
    # Registers Employee with Base.metadata
    from employee_api.models import employee  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()
