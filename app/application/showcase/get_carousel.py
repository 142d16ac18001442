"""
Use case: Latest portfolios for the homepage carousel.

Input: GetCarouselQuery (limit)
Output: list[PortfolioSummary]
Side effects: None.
Failure cases: ValidationError for a non-positive limit.
"""

from app.application.showcase.dtos import GetCarouselQuery
from app.domain.showcase.entities import PortfolioSummary
from app.domain.showcase.errors import ValidationError
from app.domain.showcase.ports import PortfolioReader


class GetCarouselUseCase:
    """Returns header-image summaries of the newest portfolios.

    A missing limit falls back to ``default_limit``; larger requests
    are clamped to ``max_limit``.
    """

    def __init__(
        self,
        portfolio_reader: PortfolioReader,
        default_limit: int = 10,
        max_limit: int = 50,
    ) -> None:
        self._portfolio_reader = portfolio_reader
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def execute(self, query: GetCarouselQuery) -> list[PortfolioSummary]:
        limit = self._default_limit if query.limit is None else query.limit
        if limit < 1:
            raise ValidationError("Carousel limit must be a positive integer")
        return await self._portfolio_reader.carousel(min(limit, self._max_limit))
