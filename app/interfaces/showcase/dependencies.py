"""
Dependency injection for the showcase bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
"""

from functools import partial
from typing import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine

from app.application.showcase.create_category import CreateCategoryUseCase
from app.application.showcase.create_portfolio import CreatePortfolioUseCase
from app.application.showcase.delete_category import DeleteCategoryUseCase
from app.application.showcase.delete_portfolio import DeletePortfolioUseCase
from app.application.showcase.get_carousel import GetCarouselUseCase
from app.application.showcase.get_portfolio import GetPortfolioUseCase
from app.application.showcase.list_categories import ListCategoriesUseCase
from app.application.showcase.list_portfolios import ListPortfoliosUseCase
from app.application.showcase.list_portfolios_by_category import (
    ListPortfoliosByCategoryUseCase,
)
from app.application.showcase.update_category import UpdateCategoryUseCase
from app.application.showcase.update_portfolio import UpdatePortfolioUseCase
from app.core.config import settings
from app.domain.showcase.ports import (
    AssetStorage,
    CategoryRepository,
    PortfolioReader,
    PortfolioUnitOfWork,
)
from app.infrastructure.showcase.category_repository import SqlCategoryRepository
from app.infrastructure.showcase.portfolio_repository import SqlPortfolioReader
from app.infrastructure.showcase.unit_of_work import SqlPortfolioUnitOfWork
from app.interfaces.resources import get_asset_storage, get_engine
from app.interfaces.showcase.forms import UploadPolicy


def get_category_repository(engine: AsyncEngine = Depends(get_engine)) -> CategoryRepository:
    return SqlCategoryRepository(engine)


def get_portfolio_reader(engine: AsyncEngine = Depends(get_engine)) -> PortfolioReader:
    return SqlPortfolioReader(engine)


def get_unit_of_work_factory(
    engine: AsyncEngine = Depends(get_engine),
) -> Callable[[], PortfolioUnitOfWork]:
    """Each call of the returned factory opens a fresh transaction."""
    return partial(SqlPortfolioUnitOfWork, engine)


def get_upload_policy() -> UploadPolicy:
    return UploadPolicy(
        max_files=settings.max_upload_files,
        max_bytes=settings.max_upload_bytes,
        allowed_types=frozenset(settings.allowed_upload_types),
    )


def get_list_categories_use_case(
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> ListCategoriesUseCase:
    return ListCategoriesUseCase(category_repo=category_repo)


def get_create_category_use_case(
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> CreateCategoryUseCase:
    return CreateCategoryUseCase(category_repo=category_repo)


def get_update_category_use_case(
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> UpdateCategoryUseCase:
    return UpdateCategoryUseCase(category_repo=category_repo)


def get_delete_category_use_case(
    category_repo: CategoryRepository = Depends(get_category_repository),
) -> DeleteCategoryUseCase:
    return DeleteCategoryUseCase(category_repo=category_repo)


def get_list_portfolios_use_case(
    reader: PortfolioReader = Depends(get_portfolio_reader),
) -> ListPortfoliosUseCase:
    return ListPortfoliosUseCase(portfolio_reader=reader)


def get_portfolio_use_case(
    reader: PortfolioReader = Depends(get_portfolio_reader),
) -> GetPortfolioUseCase:
    return GetPortfolioUseCase(portfolio_reader=reader)


def get_list_by_category_use_case(
    category_repo: CategoryRepository = Depends(get_category_repository),
    reader: PortfolioReader = Depends(get_portfolio_reader),
) -> ListPortfoliosByCategoryUseCase:
    return ListPortfoliosByCategoryUseCase(category_repo=category_repo, portfolio_reader=reader)


def get_carousel_use_case(
    reader: PortfolioReader = Depends(get_portfolio_reader),
) -> GetCarouselUseCase:
    return GetCarouselUseCase(
        portfolio_reader=reader,
        default_limit=settings.carousel_default_limit,
        max_limit=settings.carousel_max_limit,
    )


def get_create_portfolio_use_case(
    reader: PortfolioReader = Depends(get_portfolio_reader),
    unit_of_work: Callable[[], PortfolioUnitOfWork] = Depends(get_unit_of_work_factory),
    asset_storage: AssetStorage = Depends(get_asset_storage),
) -> CreatePortfolioUseCase:
    return CreatePortfolioUseCase(
        portfolio_reader=reader,
        unit_of_work=unit_of_work,
        asset_storage=asset_storage,
        asset_folder=settings.asset_folder,
    )


def get_update_portfolio_use_case(
    reader: PortfolioReader = Depends(get_portfolio_reader),
    unit_of_work: Callable[[], PortfolioUnitOfWork] = Depends(get_unit_of_work_factory),
    asset_storage: AssetStorage = Depends(get_asset_storage),
) -> UpdatePortfolioUseCase:
    return UpdatePortfolioUseCase(
        portfolio_reader=reader,
        unit_of_work=unit_of_work,
        asset_storage=asset_storage,
        asset_folder=settings.asset_folder,
    )


def get_delete_portfolio_use_case(
    reader: PortfolioReader = Depends(get_portfolio_reader),
    unit_of_work: Callable[[], PortfolioUnitOfWork] = Depends(get_unit_of_work_factory),
    asset_storage: AssetStorage = Depends(get_asset_storage),
) -> DeletePortfolioUseCase:
    return DeletePortfolioUseCase(
        portfolio_reader=reader,
        unit_of_work=unit_of_work,
        asset_storage=asset_storage,
    )
