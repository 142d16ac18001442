"""
Domain entities for the showcase bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Category:
    """A named, slugged category that portfolios can be filed under."""

    id: int
    name: str
    slug: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class CategoryUsage:
    """A category together with the number of portfolios linked to it."""

    category: Category
    total_projects: int


@dataclass(frozen=True)
class PortfolioImage:
    """A stored portfolio image.

    ``file_id`` is the remote-storage handle needed to delete the asset.
    Legacy rows may lack it; those assets cannot be removed remotely.
    """

    id: int
    image_url: str
    display_order: int
    is_header: bool = False
    alt_text: Optional[str] = None
    file_id: Optional[str] = None


@dataclass(frozen=True)
class Portfolio:
    """A portfolio aggregate: the base row plus its owned children.

    Categories are ordered by id, descriptions by display order and
    images header-first, then by display order.
    """

    id: int
    title: str
    slug: str
    project_type: str
    publisher_name: str
    project_link: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    categories: tuple[Category, ...] = field(default_factory=tuple)
    descriptions: tuple[str, ...] = field(default_factory=tuple)
    images: tuple[PortfolioImage, ...] = field(default_factory=tuple)

    @property
    def header_image(self) -> Optional[PortfolioImage]:
        """Return the header image, if the portfolio has one."""
        for image in self.images:
            if image.is_header:
                return image
        return None


@dataclass(frozen=True)
class PortfolioSummary:
    """Lightweight portfolio view used for navigation and the carousel."""

    id: int
    title: str
    slug: str
    project_type: Optional[str] = None
    publisher_name: Optional[str] = None
    header_image_url: Optional[str] = None


@dataclass(frozen=True)
class PortfolioFields:
    """Base fields required to create a portfolio."""

    title: str
    slug: str
    project_type: str
    publisher_name: str
    project_link: Optional[str] = None


@dataclass(frozen=True)
class PortfolioChanges:
    """Partial update of the base fields.

    ``None`` means "leave unchanged". For ``project_link`` an empty
    string clears the stored link.
    """

    title: Optional[str] = None
    slug: Optional[str] = None
    project_type: Optional[str] = None
    publisher_name: Optional[str] = None
    project_link: Optional[str] = None

    def as_columns(self) -> dict[str, Optional[str]]:
        """Return the provided fields as a column -> value mapping."""
        columns: dict[str, Optional[str]] = {}
        for name in ("title", "slug", "project_type", "publisher_name"):
            value = getattr(self, name)
            if value:
                columns[name] = value
        if self.project_link is not None:
            columns["project_link"] = self.project_link or None
        return columns


@dataclass(frozen=True)
class UploadedAsset:
    """Result of a successful remote upload."""

    url: str
    file_id: str


@dataclass(frozen=True)
class NewImage:
    """An image row about to be inserted for a freshly uploaded asset."""

    image_url: str
    file_id: Optional[str]
    display_order: int
    is_header: bool
    alt_text: Optional[str] = None
