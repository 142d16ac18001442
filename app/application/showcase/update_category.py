"""
Use case: Rename a category.

Input: UpdateCategoryCommand (category_id, name)
Output: Category
Side effects: Updates name, slug and updated_at.
Failure cases: ValidationError, CategoryNotFoundError, DuplicateSlugError.
"""

import logging

from app.application.showcase.dtos import UpdateCategoryCommand
from app.domain.showcase.entities import Category
from app.domain.showcase.errors import CategoryNotFoundError, DuplicateSlugError
from app.domain.showcase.ports import CategoryRepository
from app.domain.showcase.slugs import category_name_and_slug

logger = logging.getLogger(__name__)


class UpdateCategoryUseCase:
    """Renames a category and re-derives its slug."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def execute(self, command: UpdateCategoryCommand) -> Category:
        """Run the update category use case.

        The duplicate check ignores the category's own row, so saving
        an unchanged name succeeds.
        """
        name, slug = category_name_and_slug(command.name)

        if await self._category_repo.get(command.category_id) is None:
            raise CategoryNotFoundError(str(command.category_id))

        if await self._category_repo.slug_taken(slug, exclude_id=command.category_id):
            raise DuplicateSlugError(
                slug, "Another category with this name already exists"
            )

        category = await self._category_repo.rename(command.category_id, name, slug)
        if category is None:
            raise CategoryNotFoundError(str(command.category_id))

        logger.info("Updated category id=%s slug=%s", category.id, category.slug)
        return category
