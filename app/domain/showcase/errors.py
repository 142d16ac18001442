"""
Domain-specific errors for the showcase bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class ShowcaseDomainError(Exception):
    """Base error for all showcase domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(ShowcaseDomainError):
    """Raised when a required field is missing or malformed."""


class PortfolioNotFoundError(ShowcaseDomainError):
    """Raised when a portfolio cannot be found by id or slug."""

    def __init__(self, reference: str) -> None:
        super().__init__("Portfolio not found")
        self.reference = reference


class CategoryNotFoundError(ShowcaseDomainError):
    """Raised when a category cannot be found by id or slug."""

    def __init__(self, reference: str) -> None:
        super().__init__("Category not found")
        self.reference = reference


class DuplicateSlugError(ShowcaseDomainError):
    """Raised when a slug is already used by another row."""

    def __init__(self, slug: str, message: str) -> None:
        super().__init__(message)
        self.slug = slug


class CategoryInUseError(ShowcaseDomainError):
    """Raised when deleting a category that portfolios still reference."""

    def __init__(self, category_id: int, count: int) -> None:
        super().__init__(
            f"Category is used by {count} portfolio(s) and cannot be deleted"
        )
        self.category_id = category_id
        self.count = count


class InvalidImagePlanError(ShowcaseDomainError):
    """Raised when an image plan cannot be applied.

    Covers plans that reference images the portfolio does not own,
    non-new slots on create, and slots pointing at missing files.
    """


class AssetStorageError(ShowcaseDomainError):
    """Raised when the remote asset store rejects an upload or delete."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"Asset {operation} failed: {reason}")
        self.operation = operation
        self.reason = reason
