"""
Adapter: Portfolio persistence.

Implements the PortfolioReader and PortfolioWriter ports.

The reader composes aggregates on short-lived pooled connections.
The writer is bound to the connection of an open unit of work and
never commits on its own.
"""

from collections import defaultdict
from typing import Optional, Sequence

from sqlalchemy import Select, delete, func, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from app.domain.showcase.entities import (
    NewImage,
    Portfolio,
    PortfolioChanges,
    PortfolioFields,
    PortfolioImage,
    PortfolioSummary,
)
from app.domain.showcase.ports import PortfolioReader, PortfolioWriter
from app.infrastructure.showcase.category_repository import to_category
from app.infrastructure.showcase.tables import (
    categories,
    portfolio_categories,
    portfolio_descriptions,
    portfolio_images,
    portfolios,
)

NEWEST_FIRST = (portfolios.c.created_at.desc(), portfolios.c.id.desc())
HEADER_FIRST = (
    portfolio_images.c.is_header.desc(),
    portfolio_images.c.display_order.asc(),
    portfolio_images.c.id.asc(),
)


def to_image(row: RowMapping) -> PortfolioImage:
    """Map an image row to its entity."""
    return PortfolioImage(
        id=row["id"],
        image_url=row["image_url"],
        display_order=row["display_order"],
        is_header=bool(row["is_header"]),
        alt_text=row["alt_text"],
        file_id=row["file_id"],
    )


async def compose_portfolios(
    conn: AsyncConnection, rows: Sequence[RowMapping]
) -> list[Portfolio]:
    """Attach categories, descriptions and images to portfolio rows.

    Issues one query per child table regardless of how many rows
    are composed. Output order follows ``rows``.
    """
    ids = [row["id"] for row in rows]
    if not ids:
        return []

    category_rows = (
        await conn.execute(
            select(portfolio_categories.c.portfolio_id, *categories.c)
            .join(categories, categories.c.id == portfolio_categories.c.category_id)
            .where(portfolio_categories.c.portfolio_id.in_(ids))
            .order_by(categories.c.id.asc())
        )
    ).mappings().all()
    description_rows = (
        await conn.execute(
            select(portfolio_descriptions)
            .where(portfolio_descriptions.c.portfolio_id.in_(ids))
            .order_by(
                portfolio_descriptions.c.display_order.asc(),
                portfolio_descriptions.c.id.asc(),
            )
        )
    ).mappings().all()
    image_rows = (
        await conn.execute(
            select(portfolio_images)
            .where(portfolio_images.c.portfolio_id.in_(ids))
            .order_by(*HEADER_FIRST)
        )
    ).mappings().all()

    categories_by_portfolio = defaultdict(list)
    for row in category_rows:
        categories_by_portfolio[row["portfolio_id"]].append(to_category(row))
    descriptions_by_portfolio = defaultdict(list)
    for row in description_rows:
        descriptions_by_portfolio[row["portfolio_id"]].append(row["description"])
    images_by_portfolio = defaultdict(list)
    for row in image_rows:
        images_by_portfolio[row["portfolio_id"]].append(to_image(row))

    return [
        Portfolio(
            id=row["id"],
            title=row["title"],
            slug=row["slug"],
            project_type=row["project_type"],
            publisher_name=row["publisher_name"],
            project_link=row["project_link"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            categories=tuple(categories_by_portfolio[row["id"]]),
            descriptions=tuple(descriptions_by_portfolio[row["id"]]),
            images=tuple(images_by_portfolio[row["id"]]),
        )
        for row in rows
    ]


def _summary_query() -> Select:
    header_url = (
        select(portfolio_images.c.image_url)
        .where(
            portfolio_images.c.portfolio_id == portfolios.c.id,
            portfolio_images.c.is_header.is_(True),
        )
        .order_by(portfolio_images.c.display_order.asc())
        .limit(1)
        .scalar_subquery()
    )
    return select(
        portfolios.c.id,
        portfolios.c.title,
        portfolios.c.slug,
        portfolios.c.project_type,
        portfolios.c.publisher_name,
        header_url.label("header_image_url"),
    )


def _to_summary(row: RowMapping) -> PortfolioSummary:
    return PortfolioSummary(
        id=row["id"],
        title=row["title"],
        slug=row["slug"],
        project_type=row["project_type"],
        publisher_name=row["publisher_name"],
        header_image_url=row["header_image_url"],
    )


class SqlPortfolioReader(PortfolioReader):
    """SQL implementation of the portfolio read side."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def _fetch(self, query: Select) -> list[Portfolio]:
        async with self._engine.connect() as conn:
            rows = (await conn.execute(query)).mappings().all()
            return await compose_portfolios(conn, rows)

    async def get(self, portfolio_id: int) -> Optional[Portfolio]:
        found = await self._fetch(select(portfolios).where(portfolios.c.id == portfolio_id))
        return found[0] if found else None

    async def get_by_slug(self, slug: str) -> Optional[Portfolio]:
        found = await self._fetch(select(portfolios).where(portfolios.c.slug == slug))
        return found[0] if found else None

    async def list_all(self) -> list[Portfolio]:
        return await self._fetch(select(portfolios).order_by(*NEWEST_FIRST))

    async def list_by_category(self, category_id: int) -> list[Portfolio]:
        query = (
            select(portfolios)
            .join(
                portfolio_categories,
                portfolio_categories.c.portfolio_id == portfolios.c.id,
            )
            .where(portfolio_categories.c.category_id == category_id)
            .order_by(*NEWEST_FIRST)
        )
        return await self._fetch(query)

    async def next_after(self, portfolio_id: int) -> Optional[PortfolioSummary]:
        following = (
            _summary_query()
            .where(portfolios.c.id > portfolio_id)
            .order_by(portfolios.c.id.asc())
            .limit(1)
        )
        first = _summary_query().order_by(portfolios.c.id.asc()).limit(1)
        async with self._engine.connect() as conn:
            row = (await conn.execute(following)).mappings().first()
            if row is None:
                row = (await conn.execute(first)).mappings().first()
        return _to_summary(row) if row else None

    async def carousel(self, limit: int) -> list[PortfolioSummary]:
        query = _summary_query().order_by(*NEWEST_FIRST).limit(limit)
        async with self._engine.connect() as conn:
            rows = (await conn.execute(query)).mappings().all()
        return [_to_summary(row) for row in rows]

    async def exists(self, portfolio_id: int) -> bool:
        query = select(portfolios.c.id).where(portfolios.c.id == portfolio_id)
        async with self._engine.connect() as conn:
            return (await conn.execute(query)).first() is not None

    async def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        query = select(portfolios.c.id).where(portfolios.c.slug == slug)
        if exclude_id is not None:
            query = query.where(portfolios.c.id != exclude_id)
        async with self._engine.connect() as conn:
            return (await conn.execute(query.limit(1))).first() is not None


class SqlPortfolioWriter(PortfolioWriter):
    """SQL implementation of portfolio mutations on a transaction's connection."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def add(self, fields: PortfolioFields) -> int:
        result = await self._conn.execute(
            insert(portfolios).values(
                title=fields.title,
                slug=fields.slug,
                project_type=fields.project_type,
                publisher_name=fields.publisher_name,
                project_link=fields.project_link or None,
            )
        )
        return result.inserted_primary_key[0]

    async def get_title(self, portfolio_id: int) -> Optional[str]:
        result = await self._conn.execute(
            select(portfolios.c.title).where(portfolios.c.id == portfolio_id)
        )
        return result.scalar_one_or_none()

    async def apply_changes(self, portfolio_id: int, changes: PortfolioChanges) -> bool:
        result = await self._conn.execute(
            update(portfolios)
            .where(portfolios.c.id == portfolio_id)
            .values(**changes.as_columns(), updated_at=func.now())
        )
        return result.rowcount > 0

    async def set_categories(self, portfolio_id: int, slugs: Sequence[str]) -> list[int]:
        await self._conn.execute(
            delete(portfolio_categories).where(
                portfolio_categories.c.portfolio_id == portfolio_id
            )
        )
        wanted = list(dict.fromkeys(slug for slug in slugs if slug))
        if not wanted:
            return []

        result = await self._conn.execute(
            select(categories.c.id)
            .where(categories.c.slug.in_(wanted))
            .order_by(categories.c.id.asc())
        )
        category_ids = list(result.scalars())
        if category_ids:
            await self._conn.execute(
                insert(portfolio_categories),
                [
                    {"portfolio_id": portfolio_id, "category_id": category_id}
                    for category_id in category_ids
                ],
            )
        return category_ids

    async def set_descriptions(self, portfolio_id: int, descriptions: Sequence[str]) -> None:
        await self._conn.execute(
            delete(portfolio_descriptions).where(
                portfolio_descriptions.c.portfolio_id == portfolio_id
            )
        )
        if not descriptions:
            return
        await self._conn.execute(
            insert(portfolio_descriptions),
            [
                {
                    "portfolio_id": portfolio_id,
                    "description": description,
                    "display_order": order,
                }
                for order, description in enumerate(descriptions, start=1)
            ],
        )

    async def list_images(self, portfolio_id: int) -> list[PortfolioImage]:
        result = await self._conn.execute(
            select(portfolio_images)
            .where(portfolio_images.c.portfolio_id == portfolio_id)
            .order_by(*HEADER_FIRST)
        )
        return [to_image(row) for row in result.mappings()]

    async def add_image(self, portfolio_id: int, image: NewImage) -> int:
        result = await self._conn.execute(
            insert(portfolio_images).values(
                portfolio_id=portfolio_id,
                image_url=image.image_url,
                file_id=image.file_id,
                display_order=image.display_order,
                alt_text=image.alt_text,
                is_header=image.is_header,
            )
        )
        return result.inserted_primary_key[0]

    async def reposition_image(self, image_id: int, display_order: int, is_header: bool) -> None:
        await self._conn.execute(
            update(portfolio_images)
            .where(portfolio_images.c.id == image_id)
            .values(display_order=display_order, is_header=is_header)
        )

    async def remove_images(self, image_ids: Sequence[int]) -> None:
        if not image_ids:
            return
        await self._conn.execute(
            delete(portfolio_images).where(portfolio_images.c.id.in_(list(image_ids)))
        )

    async def remove(self, portfolio_id: int) -> bool:
        for child in (portfolio_images, portfolio_categories, portfolio_descriptions):
            await self._conn.execute(delete(child).where(child.c.portfolio_id == portfolio_id))
        result = await self._conn.execute(
            delete(portfolios).where(portfolios.c.id == portfolio_id)
        )
        return result.rowcount > 0
