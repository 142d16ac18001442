"""
Database engine and shared table metadata.

The async engine owns the process-wide connection pool. It is created
once by the application lifespan and injected into adapters; nothing
in this module holds a global engine.
"""

import logging

from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)

metadata = MetaData()


def build_engine(url: str, pool_size: int = 5, echo: bool = False) -> AsyncEngine:
    """Build an async SQLAlchemy engine.

    Args:
        url: Async database URL, e.g. ``postgresql+asyncpg://...``.
        pool_size: Connections kept in the pool (ignored by SQLite).
        echo: Log every statement. Never enable in production.
    """
    options = {"pool_pre_ping": True, "echo": echo}
    if not url.startswith("sqlite"):
        options["pool_size"] = pool_size
    return create_async_engine(url, **options)


async def ping(engine: AsyncEngine) -> None:
    """Run a trivial query. Raises whatever the driver raises on failure."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table registered on ``metadata`` that does not exist yet."""
    # Register the table modules on the shared metadata.
    from app.infrastructure.admin import tables as _admin_tables  # noqa: F401
    from app.infrastructure.showcase import tables as _showcase_tables  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema is up to date")
