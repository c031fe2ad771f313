"""
Database engine, session factory and schema bootstrap.

Each request gets its own ``AsyncSession``; the session commits when the
request handler returns and rolls back when it raises.
"""

from collections.abc import AsyncGenerator
from typing import Any

from loguru import logger
from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from cartshop.core.config import settings

DEFAULT_MEMBERS = (
    ("a@a.com", "password1"),
    ("b@b.com", "password2"),
)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


def _engine_options() -> dict[str, Any]:
    """Pool options per backend."""
    if settings.is_sqlite:
        # A single shared connection keeps an in-memory database alive
        if ":memory:" in settings.database_url or settings.database_url.endswith("://"):
            return {"poolclass": StaticPool}
        return {}

    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    **_engine_options(),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a transactional session."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def create_tables() -> None:
    """Create all tables. Safe to call repeatedly."""
    # Register models on the metadata
    from cartshop.models import member, shop  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_members(session: AsyncSession) -> int:
    """Insert the default members when the members table is empty."""
    from cartshop.models.member import Member

    count = await session.scalar(select(func.count()).select_from(Member))
    if count:
        return 0

    session.add_all(
        Member(email=email, password=password) for email, password in DEFAULT_MEMBERS
    )
    await session.flush()
    logger.info(f"Seeded {len(DEFAULT_MEMBERS)} default members")
    return len(DEFAULT_MEMBERS)


async def init_db() -> None:
    """Create the schema and optionally seed default data."""
    await create_tables()

    if settings.seed_members:
        async with async_session_factory() as session:
            await seed_members(session)
            await session.commit()


async def check_db() -> bool:
    """Run a trivial query against the store."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False


async def close_db() -> None:
    """Dispose of the engine's connection pool."""
    await engine.dispose()
