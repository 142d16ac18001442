"""
Use case: List the portfolios filed under a category.

Input: ListByCategoryQuery (category_slug)
Output: CategoryPortfolios
Side effects: None.
Failure cases: CategoryNotFoundError.
"""

from app.application.showcase.dtos import CategoryPortfolios, ListByCategoryQuery
from app.domain.showcase.errors import CategoryNotFoundError
from app.domain.showcase.ports import CategoryRepository, PortfolioReader


class ListPortfoliosByCategoryUseCase:
    """Resolves the category slug, then lists its portfolios newest first."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        portfolio_reader: PortfolioReader,
    ) -> None:
        self._category_repo = category_repo
        self._portfolio_reader = portfolio_reader

    async def execute(self, query: ListByCategoryQuery) -> CategoryPortfolios:
        category = await self._category_repo.get_by_slug(query.category_slug)
        if category is None:
            raise CategoryNotFoundError(query.category_slug)

        portfolios = await self._portfolio_reader.list_by_category(category.id)
        return CategoryPortfolios(category=category, portfolios=portfolios)
