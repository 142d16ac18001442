"""
Pydantic schemas for the showcase API.

Response models mirror the stored columns (snake_case) and wrap every
payload in the ``{"success": ..., "message": ...}`` envelope.
Image plan slots keep the camelCase keys the admin client sends.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domain.showcase.entities import (
    Category,
    CategoryUsage,
    Portfolio,
    PortfolioImage,
    PortfolioSummary,
)
from app.domain.showcase.image_plan import ImageSlot


class ImageSlotSchema(BaseModel):
    """One entry of the ``images_meta`` form field.

    Attributes:
        is_new: True when the slot is backed by an uploaded file.
        url: URL of a kept image.
        image_id: Id of a kept image.
        file_index: Index of the uploaded file for new or replaced slots.
        alt_text: Optional alt text.
    """

    model_config = ConfigDict(populate_by_name=True)

    is_new: bool = Field(False, alias="isNew")
    url: Optional[str] = None
    image_id: Optional[int] = Field(None, alias="id")
    file_index: Optional[int] = Field(None, alias="fileIndex", ge=0)
    alt_text: Optional[str] = Field(None, alias="altText", max_length=255)

    def to_slot(self) -> ImageSlot:
        return ImageSlot(
            is_new=self.is_new,
            url=self.url,
            image_id=self.image_id,
            file_index=self.file_index,
            alt_text=self.alt_text,
        )


class CategoryRequest(BaseModel):
    """Request schema for creating or renaming a category."""

    name: str = Field(..., max_length=100, description="Display name; the slug is derived")


class CategoryItem(BaseModel):
    id: int
    name: str
    slug: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryItem":
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class CategoryUsageItem(CategoryItem):
    """A category with the number of portfolios filed under it."""

    total_projects: int

    @classmethod
    def from_usage(cls, usage: CategoryUsage) -> "CategoryUsageItem":
        category = usage.category
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            created_at=category.created_at,
            updated_at=category.updated_at,
            total_projects=usage.total_projects,
        )


class ImageItem(BaseModel):
    id: int
    image_url: str
    display_order: int
    is_header: bool
    alt_text: Optional[str] = None

    @classmethod
    def from_entity(cls, image: PortfolioImage) -> "ImageItem":
        return cls(
            id=image.id,
            image_url=image.image_url,
            display_order=image.display_order,
            is_header=image.is_header,
            alt_text=image.alt_text,
        )


class PortfolioItem(BaseModel):
    """A fully composed portfolio.

    Images are header first, then by display order.
    """

    id: int
    title: str
    slug: str
    project_type: str
    publisher_name: str
    project_link: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    header_image_url: Optional[str] = None
    categories: list[CategoryItem]
    descriptions: list[str]
    images: list[ImageItem]

    @classmethod
    def from_entity(cls, portfolio: Portfolio) -> "PortfolioItem":
        header = portfolio.header_image
        return cls(
            id=portfolio.id,
            title=portfolio.title,
            slug=portfolio.slug,
            project_type=portfolio.project_type,
            publisher_name=portfolio.publisher_name,
            project_link=portfolio.project_link,
            created_at=portfolio.created_at,
            updated_at=portfolio.updated_at,
            header_image_url=header.image_url if header else None,
            categories=[CategoryItem.from_entity(c) for c in portfolio.categories],
            descriptions=list(portfolio.descriptions),
            images=[ImageItem.from_entity(i) for i in portfolio.images],
        )


class PortfolioSummaryItem(BaseModel):
    """Header-image summary used by the carousel and the "next" pointer."""

    id: int
    title: str
    slug: str
    project_type: Optional[str] = None
    publisher_name: Optional[str] = None
    header_image_url: Optional[str] = None

    @classmethod
    def from_entity(cls, summary: PortfolioSummary) -> "PortfolioSummaryItem":
        return cls(
            id=summary.id,
            title=summary.title,
            slug=summary.slug,
            project_type=summary.project_type,
            publisher_name=summary.publisher_name,
            header_image_url=summary.header_image_url,
        )


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class CategoryListResponse(BaseModel):
    success: bool = True
    categories: list[CategoryItem]


class CategoryUsageListResponse(BaseModel):
    success: bool = True
    categories: list[CategoryUsageItem]


class CategoryResponse(BaseModel):
    success: bool = True
    message: str
    category: CategoryItem


class PortfolioListResponse(BaseModel):
    success: bool = True
    count: int
    portfolios: list[PortfolioItem]


class CarouselResponse(BaseModel):
    success: bool = True
    count: int
    portfolios: list[PortfolioSummaryItem]


class PortfolioDetailResponse(BaseModel):
    """A portfolio and the next one in id order (wrapping to the first)."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    portfolio: PortfolioItem
    next_portfolio: Optional[PortfolioSummaryItem] = Field(None, alias="nextPortfolio")


class CategoryPortfoliosResponse(BaseModel):
    success: bool = True
    category: CategoryItem
    count: int
    portfolios: list[PortfolioItem]


class PortfolioResponse(BaseModel):
    success: bool = True
    message: str
    portfolio: PortfolioItem


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    success: bool = False
    message: str
