"""
Use case: Create a category.

Input: CreateCategoryCommand (name)
Output: Category
Side effects: Inserts a row in portfolio_main_categories.
Failure cases: ValidationError, DuplicateSlugError.
"""

import logging

from app.application.showcase.dtos import CreateCategoryCommand
from app.domain.showcase.entities import Category
from app.domain.showcase.errors import DuplicateSlugError
from app.domain.showcase.ports import CategoryRepository
from app.domain.showcase.slugs import category_name_and_slug

logger = logging.getLogger(__name__)


class CreateCategoryUseCase:
    """Creates a category after checking its slug is free."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def execute(self, command: CreateCategoryCommand) -> Category:
        """Run the create category use case.

        Raises:
            ValidationError: If the name is blank.
            DuplicateSlugError: If a category with the same slug exists.
        """
        name, slug = category_name_and_slug(command.name)

        if await self._category_repo.slug_taken(slug):
            raise DuplicateSlugError(slug, "Category already exists")

        category = await self._category_repo.add(name, slug)
        logger.info("Created category id=%s slug=%s", category.id, category.slug)
        return category
