"""
Use case: Update a portfolio and reconcile its image set.

Input: UpdatePortfolioCommand
Output: Portfolio (fully composed aggregate)
Side effects: Mutates rows in one transaction; uploads new files; after
    commit, deletes the remote files of removed images.
Failure cases: PortfolioNotFoundError, DuplicateSlugError,
    InvalidImagePlanError, AssetStorageError, storage errors.

Ordering guarantee: remote deletes are issued only once the transaction
has committed. A failure anywhere before that rolls back every field,
category, description and image change and deletes nothing remotely.
The only inconsistency this allows is an orphaned remote file, never a
row pointing at a deleted one.
"""

import logging
from typing import Callable

from app.application.showcase.assets import (
    check_file_references,
    purge_assets,
    upload_and_insert,
)
from app.application.showcase.dtos import UpdatePortfolioCommand
from app.domain.showcase.entities import Portfolio, PortfolioImage
from app.domain.showcase.errors import DuplicateSlugError, PortfolioNotFoundError
from app.domain.showcase.image_plan import reconcile_images
from app.domain.showcase.ports import AssetStorage, PortfolioReader, PortfolioUnitOfWork

logger = logging.getLogger(__name__)


class UpdatePortfolioUseCase:
    """Applies a partial update and an image plan to a portfolio.

    Steps inside the transaction:
        1. write provided base fields (``updated_at`` always refreshed)
        2. replace categories and descriptions when provided
        3. diff stored images against the plan
        4. upload new files, insert their rows
        5. rewrite moved rows, delete removed rows
        6. commit
    Then, outside the transaction, purge remote files of removed rows.
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

    async def execute(self, command: UpdatePortfolioCommand) -> Portfolio:
        """Run the update portfolio use case.

        Args:
            command: Portfolio id, partial fields and optional replacements.

        Returns:
            The updated aggregate as stored.

        Raises:
            PortfolioNotFoundError: If the portfolio does not exist.
            DuplicateSlugError: If the new slug belongs to another portfolio.
            InvalidImagePlanError: If the plan cannot be applied.
        """
        portfolio_id = command.portfolio_id

        if not await self._portfolio_reader.exists(portfolio_id):
            raise PortfolioNotFoundError(str(portfolio_id))

        slug = command.changes.slug
        if slug and await self._portfolio_reader.slug_taken(slug, exclude_id=portfolio_id):
            raise DuplicateSlugError(slug, "Slug already taken by another portfolio")

        if command.image_plan is not None:
            check_file_references(command.image_plan, command.files)

        logger.info(
            "Updating portfolio id=%s fields=%s categories=%s descriptions=%s images=%s",
            portfolio_id,
            sorted(command.changes.as_columns()),
            command.category_slugs is not None,
            command.descriptions is not None,
            command.image_plan is not None,
        )

        removed: list[PortfolioImage] = []

        async with self._unit_of_work() as uow:
            writer = uow.portfolios
            if not await writer.apply_changes(portfolio_id, command.changes):
                # Deleted after the existence check.
                raise PortfolioNotFoundError(str(portfolio_id))

            if command.category_slugs is not None:
                await writer.set_categories(portfolio_id, command.category_slugs)

            if command.descriptions is not None:
                await writer.set_descriptions(portfolio_id, command.descriptions)

            if command.image_plan is not None:
                current = await writer.list_images(portfolio_id)
                changes = reconcile_images(current, command.image_plan)
                logger.info(
                    "Image plan for portfolio id=%s: uploads=%d moves=%d removals=%d",
                    portfolio_id,
                    len(changes.uploads),
                    len(changes.repositions),
                    len(changes.removals),
                )

                if not changes.is_empty:
                    title = command.changes.title or await writer.get_title(portfolio_id)
                    await upload_and_insert(
                        self._asset_storage,
                        writer,
                        portfolio_id,
                        changes.uploads,
                        command.files,
                        self._asset_folder,
                        title,
                    )
                    for move in changes.repositions:
                        await writer.reposition_image(
                            move.image_id, move.display_order, move.is_header
                        )
                    await writer.remove_images(changes.removed_ids)
                    removed = changes.removals

            await uow.commit()

        if removed:
            purged = await purge_assets(self._asset_storage, removed)
            logger.info(
                "Purged %d of %d remote asset(s) for portfolio id=%s",
                purged,
                len(removed),
                portfolio_id,
            )

        portfolio = await self._portfolio_reader.get(portfolio_id)
        if portfolio is None:
            raise PortfolioNotFoundError(str(portfolio_id))
        return portfolio
