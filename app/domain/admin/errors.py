"""
Domain-specific errors for the admin bounded context.

Mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class AdminDomainError(Exception):
    """Base error for all admin domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidCredentialsError(AdminDomainError):
    """Raised on a failed login. Unknown email and wrong password look the same."""

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class AuthenticationError(AdminDomainError):
    """Raised when a request carries no valid admin token."""


class AdminNotFoundError(AdminDomainError):
    """Raised when the admin referenced by a token no longer exists."""

    def __init__(self, admin_id: int) -> None:
        super().__init__("Admin not found")
        self.admin_id = admin_id


class AdminValidationError(AdminDomainError):
    """Raised when admin input is missing or malformed."""
