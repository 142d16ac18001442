"""
Data Transfer Objects for the showcase application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Optional

from app.domain.showcase.entities import (
    Category,
    Portfolio,
    PortfolioChanges,
    PortfolioFields,
    PortfolioSummary,
)
from app.domain.showcase.image_plan import ImageSlot


@dataclass(frozen=True)
class FilePayload:
    """A raw uploaded file referenced by index from an image plan.

    Attributes:
        file_name: Original client-side file name.
        content: File bytes.
        content_type: MIME type reported by the client.
    """

    file_name: str
    content: bytes
    content_type: Optional[str] = None


@dataclass(frozen=True)
class CreateCategoryCommand:
    """Input DTO for creating a category."""

    name: str


@dataclass(frozen=True)
class UpdateCategoryCommand:
    """Input DTO for renaming a category."""

    category_id: int
    name: str


@dataclass(frozen=True)
class DeleteCategoryCommand:
    """Input DTO for deleting a category."""

    category_id: int


@dataclass(frozen=True)
class GetPortfolioQuery:
    """Input DTO for reading one portfolio.

    Exactly one of ``portfolio_id`` and ``slug`` is expected.
    """

    portfolio_id: Optional[int] = None
    slug: Optional[str] = None


@dataclass(frozen=True)
class PortfolioDetail:
    """Output DTO for a single portfolio with its circular "next" pointer."""

    portfolio: Portfolio
    next_portfolio: Optional[PortfolioSummary]


@dataclass(frozen=True)
class ListByCategoryQuery:
    """Input DTO for listing the portfolios of one category."""

    category_slug: str


@dataclass(frozen=True)
class CategoryPortfolios:
    """Output DTO for a category and the portfolios filed under it."""

    category: Category
    portfolios: list[Portfolio]


@dataclass(frozen=True)
class GetCarouselQuery:
    """Input DTO for the carousel listing.

    Attributes:
        limit: Requested number of entries. None means the default.
    """

    limit: Optional[int] = None


@dataclass(frozen=True)
class CreatePortfolioCommand:
    """Input DTO for creating a portfolio.

    Attributes:
        fields: Required base fields.
        category_slugs: Desired categories. Unknown slugs are skipped.
        descriptions: Ordered description paragraphs.
        image_plan: Ordered slots, all of which must be new.
        files: Raw files referenced by ``ImageSlot.file_index``.
    """

    fields: PortfolioFields
    category_slugs: list[str] = field(default_factory=list)
    descriptions: list[str] = field(default_factory=list)
    image_plan: list[ImageSlot] = field(default_factory=list)
    files: list[FilePayload] = field(default_factory=list)


@dataclass(frozen=True)
class UpdatePortfolioCommand:
    """Input DTO for updating a portfolio.

    ``None`` for ``category_slugs``, ``descriptions`` or ``image_plan``
    leaves that part of the aggregate untouched.
    """

    portfolio_id: int
    changes: PortfolioChanges = field(default_factory=PortfolioChanges)
    category_slugs: Optional[list[str]] = None
    descriptions: Optional[list[str]] = None
    image_plan: Optional[list[ImageSlot]] = None
    files: list[FilePayload] = field(default_factory=list)


@dataclass(frozen=True)
class DeletePortfolioCommand:
    """Input DTO for deleting a portfolio."""

    portfolio_id: int
