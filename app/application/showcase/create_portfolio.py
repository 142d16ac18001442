"""
Use case: Create a portfolio with its categories, descriptions and images.

Input: CreatePortfolioCommand
Output: Portfolio (fully composed aggregate)
Side effects: Inserts rows in one transaction; uploads files to the asset store.
Failure cases: ValidationError, DuplicateSlugError, InvalidImagePlanError,
    AssetStorageError, storage errors.

Uploads happen inside the open transaction but are not part of it:
if the transaction rolls back, already uploaded assets are not retracted.
"""

import logging
from typing import Callable

from app.application.showcase.assets import check_file_references, upload_and_insert
from app.application.showcase.dtos import CreatePortfolioCommand
from app.domain.showcase.entities import Portfolio
from app.domain.showcase.errors import DuplicateSlugError, PortfolioNotFoundError, ValidationError
from app.domain.showcase.image_plan import plan_new_images
from app.domain.showcase.ports import AssetStorage, PortfolioReader, PortfolioUnitOfWork

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "slug", "project_type", "publisher_name")


class CreatePortfolioUseCase:
    """Creates a portfolio aggregate atomically.

    The first image of the plan becomes the header image.
    """

    def __init__(
        self,
        portfolio_reader: PortfolioReader,
        unit_of_work: Callable[[], PortfolioUnitOfWork],
        asset_storage: AssetStorage,
        asset_folder: str,
    ) -> None:
        self._portfolio_reader = portfolio_reader
        self._unit_of_work = unit_of_work
        self._asset_storage = asset_storage
        self._asset_folder = asset_folder

    async def execute(self, command: CreatePortfolioCommand) -> Portfolio:
        """Run the create portfolio use case.

        Args:
            command: Base fields, categories, descriptions, image plan and files.

        Returns:
            The created aggregate as stored.

        Raises:
            ValidationError: If a required field is blank.
            DuplicateSlugError: If the slug is already taken.
            InvalidImagePlanError: If a slot is not new or its file is missing.
        """
        fields = command.fields
        missing = [name for name in REQUIRED_FIELDS if not getattr(fields, name)]
        if missing:
            raise ValidationError(
                "Title, slug, project_type, and publisher_name are required"
            )

        if await self._portfolio_reader.slug_taken(fields.slug):
            raise DuplicateSlugError(fields.slug, "Portfolio with this slug already exists")

        uploads = plan_new_images(command.image_plan)
        check_file_references(command.image_plan, command.files)

        logger.info(
            "Creating portfolio slug=%s categories=%d descriptions=%d images=%d",
            fields.slug,
            len(command.category_slugs),
            len(command.descriptions),
            len(uploads),
        )

        async with self._unit_of_work() as uow:
            portfolio_id = await uow.portfolios.add(fields)
            await uow.portfolios.set_categories(portfolio_id, command.category_slugs)
            await uow.portfolios.set_descriptions(portfolio_id, command.descriptions)
            await upload_and_insert(
                self._asset_storage,
                uow.portfolios,
                portfolio_id,
                uploads,
                command.files,
                self._asset_folder,
                fields.title,
            )
            await uow.commit()

        logger.info("Created portfolio id=%s slug=%s", portfolio_id, fields.slug)

        portfolio = await self._portfolio_reader.get(portfolio_id)
        if portfolio is None:
            # Deleted concurrently right after commit.
            raise PortfolioNotFoundError(str(portfolio_id))
        return portfolio
