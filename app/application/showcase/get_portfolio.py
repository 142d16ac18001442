"""
Use case: Read one portfolio aggregate with its "next" pointer.

Input: GetPortfolioQuery (portfolio_id or slug)
Output: PortfolioDetail
Side effects: None.
Failure cases: PortfolioNotFoundError.
"""

import logging

from app.application.showcase.dtos import GetPortfolioQuery, PortfolioDetail
from app.domain.showcase.errors import PortfolioNotFoundError, ValidationError
from app.domain.showcase.ports import PortfolioReader

logger = logging.getLogger(__name__)


class GetPortfolioUseCase:
    """Loads a portfolio by id or slug plus the next one by id.

    Navigation is circular: the last portfolio points back to the first.
    """

    def __init__(self, portfolio_reader: PortfolioReader) -> None:
        self._portfolio_reader = portfolio_reader

    async def execute(self, query: GetPortfolioQuery) -> PortfolioDetail:
        """Run the get portfolio use case.

        Args:
            query: Lookup by ``portfolio_id`` or, when absent, by ``slug``.

        Returns:
            The aggregate and a summary of the next portfolio.

        Raises:
            PortfolioNotFoundError: If nothing matches.
        """
        if query.portfolio_id is not None:
            portfolio = await self._portfolio_reader.get(query.portfolio_id)
            reference = str(query.portfolio_id)
        elif query.slug:
            portfolio = await self._portfolio_reader.get_by_slug(query.slug)
            reference = query.slug
        else:
            raise ValidationError("A portfolio id or slug is required")

        if portfolio is None:
            raise PortfolioNotFoundError(reference)

        next_portfolio = await self._portfolio_reader.next_after(portfolio.id)
        return PortfolioDetail(portfolio=portfolio, next_portfolio=next_portfolio)
