"""
Use case: Delete a portfolio and everything it owns.

Input: DeletePortfolioCommand (portfolio_id)
Output: None
Side effects: Deletes image, category link, description and portfolio rows
    in one transaction; after commit, deletes the remote image files.
Failure cases: PortfolioNotFoundError, storage errors.
"""

import logging
from typing import Callable

from app.application.showcase.assets import purge_assets
from app.application.showcase.dtos import DeletePortfolioCommand
from app.domain.showcase.errors import PortfolioNotFoundError
from app.domain.showcase.ports import AssetStorage, PortfolioReader, PortfolioUnitOfWork

logger = logging.getLogger(__name__)


class DeletePortfolioUseCase:
    """Deletes a portfolio, then best-effort purges its remote files.

    If the transaction fails no remote delete is attempted.
    """

    def __init__(
        self,
        portfolio_reader: PortfolioReader,
        unit_of_work: Callable[[], PortfolioUnitOfWork],
        asset_storage: AssetStorage,
    ) -> None:
        self._portfolio_reader = portfolio_reader
        self._unit_of_work = unit_of_work
        self._asset_storage = asset_storage

    async def execute(self, command: DeletePortfolioCommand) -> None:
        portfolio_id = command.portfolio_id
        if not await self._portfolio_reader.exists(portfolio_id):
            raise PortfolioNotFoundError(str(portfolio_id))

        async with self._unit_of_work() as uow:
            images = await uow.portfolios.list_images(portfolio_id)
            if not await uow.portfolios.remove(portfolio_id):
                raise PortfolioNotFoundError(str(portfolio_id))
            await uow.commit()

        logger.info("Deleted portfolio id=%s with %d image(s)", portfolio_id, len(images))

        if images:
            await purge_assets(self._asset_storage, images)
