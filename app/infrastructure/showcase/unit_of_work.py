"""
Adapter: Transactional unit of work for portfolio writes.

Implements PortfolioUnitOfWork port.
Acquires one dedicated connection from the engine's pool, begins a
transaction and exposes a writer bound to it. Leaving the block without
a commit rolls back; the connection goes back to the pool on every path.
"""

import logging
from types import TracebackType
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncTransaction

from app.domain.showcase.ports import PortfolioUnitOfWork
from app.infrastructure.showcase.portfolio_repository import SqlPortfolioWriter

logger = logging.getLogger(__name__)


class SqlPortfolioUnitOfWork(PortfolioUnitOfWork):
    """SQL unit of work. One instance per transaction; not reusable."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._connection: Optional[AsyncConnection] = None
        self._transaction: Optional[AsyncTransaction] = None

    async def __aenter__(self) -> "SqlPortfolioUnitOfWork":
        self._connection = await self._engine.connect()
        try:
            self._transaction = await self._connection.begin()
        except BaseException:
            await self._connection.close()
            raise
        self.portfolios = SqlPortfolioWriter(self._connection)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        try:
            if self._transaction is not None and self._transaction.is_active:
                if exc_type is not None:
                    logger.warning(
                        "Rolling back portfolio transaction after %s", exc_type.__name__
                    )
                await self.rollback()
        finally:
            if self._connection is not None:
                await self._connection.close()

    async def commit(self) -> None:
        await self._transaction.commit()

    async def rollback(self) -> None:
        await self._transaction.rollback()
