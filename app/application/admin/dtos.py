"""
Data Transfer Objects for the admin application layer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class LoginCommand:
    """Input DTO for an admin login."""

    email: str
    password: str


@dataclass(frozen=True)
class AdminProfile:
    """Output DTO for an admin, without the password hash."""

    admin_id: int
    firstname: str
    lastname: str
    email: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class LoginResult:
    """Output DTO for a successful login."""

    token: str
    admin: AdminProfile


@dataclass(frozen=True)
class EditProfileCommand:
    """Input DTO for changing an admin's name."""

    admin_id: int
    firstname: str
    lastname: str
