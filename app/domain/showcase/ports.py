"""
Port interfaces (ABCs) for the showcase bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Sequence

from app.domain.showcase.entities import (
    Category,
    CategoryUsage,
    NewImage,
    Portfolio,
    PortfolioChanges,
    PortfolioFields,
    PortfolioImage,
    PortfolioSummary,
    UploadedAsset,
)


class CategoryRepository(ABC):
    """Port for persisting and retrieving categories."""

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """Return all categories ordered by name."""
        raise NotImplementedError

    @abstractmethod
    async def list_with_usage(self) -> list[CategoryUsage]:
        """Return categories with their portfolio counts, most used first."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, category_id: int) -> Optional[Category]:
        """Return a category by id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Category]:
        """Return a category by slug, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        """Return True if another category already uses ``slug``."""
        raise NotImplementedError

    @abstractmethod
    async def add(self, name: str, slug: str) -> Category:
        """Insert a category and return it."""
        raise NotImplementedError

    @abstractmethod
    async def rename(self, category_id: int, name: str, slug: str) -> Optional[Category]:
        """Update name and slug. Returns None if the category does not exist."""
        raise NotImplementedError

    @abstractmethod
    async def count_portfolios(self, category_id: int) -> int:
        """Return how many portfolios link to the category."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, category_id: int) -> bool:
        """Delete a category. Returns False if it did not exist."""
        raise NotImplementedError


class PortfolioReader(ABC):
    """Port for composing portfolio aggregates for reading."""

    @abstractmethod
    async def get(self, portfolio_id: int) -> Optional[Portfolio]:
        """Return the aggregate for ``portfolio_id``, or None."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Portfolio]:
        """Return the aggregate with ``slug``, or None."""
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> list[Portfolio]:
        """Return every aggregate, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_category(self, category_id: int) -> list[Portfolio]:
        """Return aggregates linked to a category, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def next_after(self, portfolio_id: int) -> Optional[PortfolioSummary]:
        """Return the portfolio with the next higher id, wrapping to the lowest."""
        raise NotImplementedError

    @abstractmethod
    async def carousel(self, limit: int) -> list[PortfolioSummary]:
        """Return up to ``limit`` summaries, newest first."""
        raise NotImplementedError

    @abstractmethod
    async def exists(self, portfolio_id: int) -> bool:
        """Return True if the portfolio exists."""
        raise NotImplementedError

    @abstractmethod
    async def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        """Return True if another portfolio already uses ``slug``."""
        raise NotImplementedError


class PortfolioWriter(ABC):
    """Port for portfolio mutations. Bound to one open transaction."""

    @abstractmethod
    async def add(self, fields: PortfolioFields) -> int:
        """Insert the portfolio row and return its id."""
        raise NotImplementedError

    @abstractmethod
    async def get_title(self, portfolio_id: int) -> Optional[str]:
        """Return the stored title, or None if the portfolio is gone."""
        raise NotImplementedError

    @abstractmethod
    async def apply_changes(self, portfolio_id: int, changes: PortfolioChanges) -> bool:
        """Write the provided fields and refresh ``updated_at``.

        Returns False when the portfolio row no longer exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def set_categories(self, portfolio_id: int, slugs: Sequence[str]) -> list[int]:
        """Replace category links. Unknown slugs are skipped.

        Returns:
            Ids of the linked categories.
        """
        raise NotImplementedError

    @abstractmethod
    async def set_descriptions(self, portfolio_id: int, descriptions: Sequence[str]) -> None:
        """Replace descriptions, numbering them from 1."""
        raise NotImplementedError

    @abstractmethod
    async def list_images(self, portfolio_id: int) -> list[PortfolioImage]:
        """Return stored images header-first, then by display order."""
        raise NotImplementedError

    @abstractmethod
    async def add_image(self, portfolio_id: int, image: NewImage) -> int:
        """Insert an image row and return its id."""
        raise NotImplementedError

    @abstractmethod
    async def reposition_image(self, image_id: int, display_order: int, is_header: bool) -> None:
        """Rewrite the order and header flag of a stored image."""
        raise NotImplementedError

    @abstractmethod
    async def remove_images(self, image_ids: Sequence[int]) -> None:
        """Delete image rows by id."""
        raise NotImplementedError

    @abstractmethod
    async def remove(self, portfolio_id: int) -> bool:
        """Delete the portfolio row and every owned child row.

        Returns False when the portfolio row was already gone.
        """
        raise NotImplementedError


class PortfolioUnitOfWork(ABC):
    """Port for one transaction on one dedicated connection.

    Used as an async context manager. Leaving the block without
    calling ``commit`` rolls the transaction back; the connection
    is released on every exit path.
    """

    portfolios: PortfolioWriter

    @abstractmethod
    async def __aenter__(self) -> "PortfolioUnitOfWork":
        raise NotImplementedError

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    async def commit(self) -> None:
        """Commit the transaction."""
        raise NotImplementedError

    @abstractmethod
    async def rollback(self) -> None:
        """Roll the transaction back."""
        raise NotImplementedError


class AssetStorage(ABC):
    """Port for the remote asset store. Not transactional."""

    @abstractmethod
    async def upload(self, content: bytes, file_name: str, folder: str) -> UploadedAsset:
        """Upload bytes and return the public URL and file handle.

        Raises:
            AssetStorageError: If the store rejects the upload.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, file_id: str) -> None:
        """Delete a previously uploaded asset.

        Raises:
            AssetStorageError: If the store rejects the delete.
        """
        raise NotImplementedError
