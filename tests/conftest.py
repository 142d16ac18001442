"""
Shared fixtures for the showcase test suite.

Repository and use case tests run against a throwaway SQLite database
(aiosqlite) built from the real table metadata. Remote storage is
replaced by FakeAssetStorage from ``support``.
"""

from functools import partial

import pytest
import pytest_asyncio

from app.application.showcase.create_portfolio import CreatePortfolioUseCase
from app.application.showcase.delete_portfolio import DeletePortfolioUseCase
from app.application.showcase.update_portfolio import UpdatePortfolioUseCase
from app.infrastructure.database import build_engine, create_schema
from app.infrastructure.showcase.category_repository import SqlCategoryRepository
from app.infrastructure.showcase.portfolio_repository import SqlPortfolioReader
from app.infrastructure.showcase.unit_of_work import SqlPortfolioUnitOfWork
from support import ASSET_FOLDER, FakeAssetStorage


@pytest_asyncio.fixture
async def engine(tmp_path):
    """A fresh SQLite database with the full schema."""
    eng = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'showcase.db'}")
    await create_schema(eng)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def storage() -> FakeAssetStorage:
    return FakeAssetStorage()


@pytest.fixture
def category_repo(engine) -> SqlCategoryRepository:
    return SqlCategoryRepository(engine)


@pytest.fixture
def reader(engine) -> SqlPortfolioReader:
    return SqlPortfolioReader(engine)


@pytest.fixture
def unit_of_work(engine):
    return partial(SqlPortfolioUnitOfWork, engine)


@pytest.fixture
def create_use_case(reader, unit_of_work, storage) -> CreatePortfolioUseCase:
    return CreatePortfolioUseCase(reader, unit_of_work, storage, ASSET_FOLDER)


@pytest.fixture
def update_use_case(reader, unit_of_work, storage) -> UpdatePortfolioUseCase:
    return UpdatePortfolioUseCase(reader, unit_of_work, storage, ASSET_FOLDER)


@pytest.fixture
def delete_use_case(reader, unit_of_work, storage) -> DeletePortfolioUseCase:
    return DeletePortfolioUseCase(reader, unit_of_work, storage)
