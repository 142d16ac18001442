"""
Use case: List every portfolio aggregate, newest first.
"""

from app.domain.showcase.entities import Portfolio
from app.domain.showcase.ports import PortfolioReader


class ListPortfoliosUseCase:
    def __init__(self, portfolio_reader: PortfolioReader) -> None:
        self._portfolio_reader = portfolio_reader

    async def execute(self) -> list[Portfolio]:
        return await self._portfolio_reader.list_all()
