"""
Pydantic schemas for the admin API.

Request bodies keep the ``admin_*`` keys the dashboard posts.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.application.admin.dtos import AdminProfile


class LoginRequest(BaseModel):
    """Request schema for the admin login endpoint."""

    admin_email: str = Field(..., max_length=255)
    admin_password: str = Field(..., max_length=255)


class EditProfileRequest(BaseModel):
    admin_firstname: str = Field(..., max_length=100)
    admin_lastname: str = Field(..., max_length=100)


class AdminItem(BaseModel):
    """Public view of an admin account."""

    model_config = ConfigDict(populate_by_name=True)

    admin_id: int = Field(..., alias="adminId")
    firstname: str
    lastname: str
    email: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_profile(cls, profile: AdminProfile) -> "AdminItem":
        return cls(
            admin_id=profile.admin_id,
            firstname=profile.firstname,
            lastname=profile.lastname,
            email=profile.email,
            created_at=profile.created_at,
        )


class LoginResponse(BaseModel):
    success: bool = True
    message: str
    token: str
    admin: AdminItem


class ProfileResponse(BaseModel):
    success: bool = True
    admin: AdminItem
