"""
Use case: Delete a category.

Input: DeleteCategoryCommand (category_id)
Output: None
Side effects: Deletes the category row.
Failure cases: CategoryNotFoundError, CategoryInUseError.

The usage check is a pre-delete count, not a database constraint.
A portfolio linked between the count and the delete is not detected
unless the store enforces the foreign key itself.
"""

import logging

from app.application.showcase.dtos import DeleteCategoryCommand
from app.domain.showcase.errors import CategoryInUseError, CategoryNotFoundError
from app.domain.showcase.ports import CategoryRepository

logger = logging.getLogger(__name__)


class DeleteCategoryUseCase:
    """Deletes a category that no portfolio references."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def execute(self, command: DeleteCategoryCommand) -> None:
        """Run the delete category use case."""
        category = await self._category_repo.get(command.category_id)
        if category is None:
            raise CategoryNotFoundError(str(command.category_id))

        in_use = await self._category_repo.count_portfolios(category.id)
        if in_use:
            raise CategoryInUseError(category.id, in_use)

        await self._category_repo.delete(category.id)
        logger.info("Deleted category id=%s slug=%s", category.id, category.slug)
