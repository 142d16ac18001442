"""
Domain entities for the admin bounded context.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AdminAccount:
    """An administrator of the showcase.

    ``password_hash`` never leaves the application layer.
    """

    admin_id: int
    firstname: str
    lastname: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AdminIdentity:
    """The authenticated admin attached to a request, decoded from its token."""

    admin_id: int
    email: Optional[str] = None
