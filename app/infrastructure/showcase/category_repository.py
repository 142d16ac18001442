"""
Adapter: Category repository.

Implements CategoryRepository port.
Reads and writes portfolio_main_categories through the async engine.
"""

from typing import Optional

from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncEngine

from app.domain.showcase.entities import Category, CategoryUsage
from app.domain.showcase.ports import CategoryRepository
from app.infrastructure.showcase.tables import categories, portfolio_categories


def to_category(row: RowMapping) -> Category:
    """Map a category row to its entity."""
    return Category(
        id=row["id"],
        name=row["name"],
        slug=row["slug"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class SqlCategoryRepository(CategoryRepository):
    """SQL implementation of the category repository.

    Each call runs on its own pooled connection; writes commit immediately.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def list_all(self) -> list[Category]:
        query = select(categories).order_by(categories.c.name.asc())
        async with self._engine.connect() as conn:
            rows = (await conn.execute(query)).mappings().all()
        return [to_category(row) for row in rows]

    async def list_with_usage(self) -> list[CategoryUsage]:
        total = func.count(portfolio_categories.c.portfolio_id).label("total_projects")
        query = (
            select(
                categories.c.id,
                categories.c.name,
                categories.c.slug,
                categories.c.created_at,
                categories.c.updated_at,
                total,
            )
            .select_from(
                categories.outerjoin(
                    portfolio_categories,
                    categories.c.id == portfolio_categories.c.category_id,
                )
            )
            .group_by(
                categories.c.id,
                categories.c.name,
                categories.c.slug,
                categories.c.created_at,
                categories.c.updated_at,
            )
            .order_by(desc("total_projects"), categories.c.name.asc())
        )
        async with self._engine.connect() as conn:
            rows = (await conn.execute(query)).mappings().all()
        return [
            CategoryUsage(category=to_category(row), total_projects=row["total_projects"])
            for row in rows
        ]

    async def get(self, category_id: int) -> Optional[Category]:
        query = select(categories).where(categories.c.id == category_id)
        async with self._engine.connect() as conn:
            row = (await conn.execute(query)).mappings().first()
        return to_category(row) if row else None

    async def get_by_slug(self, slug: str) -> Optional[Category]:
        query = select(categories).where(categories.c.slug == slug)
        async with self._engine.connect() as conn:
            row = (await conn.execute(query)).mappings().first()
        return to_category(row) if row else None

    async def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        query = select(categories.c.id).where(categories.c.slug == slug)
        if exclude_id is not None:
            query = query.where(categories.c.id != exclude_id)
        async with self._engine.connect() as conn:
            found = (await conn.execute(query.limit(1))).first()
        return found is not None

    async def add(self, name: str, slug: str) -> Category:
        async with self._engine.begin() as conn:
            result = await conn.execute(insert(categories).values(name=name, slug=slug))
            category_id = result.inserted_primary_key[0]
            row = (
                await conn.execute(select(categories).where(categories.c.id == category_id))
            ).mappings().one()
        return to_category(row)

    async def rename(self, category_id: int, name: str, slug: str) -> Optional[Category]:
        async with self._engine.begin() as conn:
            result = await conn.execute(
                update(categories)
                .where(categories.c.id == category_id)
                .values(name=name, slug=slug, updated_at=func.now())
            )
            if result.rowcount == 0:
                return None
            row = (
                await conn.execute(select(categories).where(categories.c.id == category_id))
            ).mappings().one()
        return to_category(row)

    async def count_portfolios(self, category_id: int) -> int:
        query = (
            select(func.count())
            .select_from(portfolio_categories)
            .where(portfolio_categories.c.category_id == category_id)
        )
        async with self._engine.connect() as conn:
            return (await conn.execute(query)).scalar_one()

    async def delete(self, category_id: int) -> bool:
        async with self._engine.begin() as conn:
            result = await conn.execute(
                delete(categories).where(categories.c.id == category_id)
            )
        return result.rowcount > 0
