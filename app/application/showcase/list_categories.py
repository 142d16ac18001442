"""
Use case: List categories, optionally with portfolio counts.

Input: with_usage flag
Output: list[Category] or list[CategoryUsage]
Side effects: None.
"""

from typing import Union

from app.domain.showcase.entities import Category, CategoryUsage
from app.domain.showcase.ports import CategoryRepository


class ListCategoriesUseCase:
    """Lists categories by name, or by usage when counts are requested."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def execute(
        self, with_usage: bool = False
    ) -> Union[list[Category], list[CategoryUsage]]:
        if with_usage:
            return await self._category_repo.list_with_usage()
        return await self._category_repo.list_all()
