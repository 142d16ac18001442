"""
Port interfaces (ABCs) for the admin bounded context.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.admin.entities import AdminAccount, AdminIdentity


class AdminRepository(ABC):
    """Port for reading and updating admin accounts."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[AdminAccount]:
        """Return the admin with ``email``, or None."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, admin_id: int) -> Optional[AdminAccount]:
        """Return the admin with ``admin_id``, or None."""
        raise NotImplementedError

    @abstractmethod
    async def update_name(self, admin_id: int, firstname: str, lastname: str) -> bool:
        """Update first and last name. Returns False if the admin is missing."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of ``password``."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``."""
        raise NotImplementedError


class TokenService(ABC):
    """Port for issuing and validating admin session tokens."""

    @abstractmethod
    def issue(self, admin: AdminAccount) -> str:
        """Return a signed session token for ``admin``."""
        raise NotImplementedError

    @abstractmethod
    def decode(self, token: str) -> AdminIdentity:
        """Return the identity carried by ``token``.

        Raises:
            AuthenticationError: If the token is invalid or expired.
        """
        raise NotImplementedError
