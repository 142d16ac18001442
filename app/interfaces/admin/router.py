"""
FastAPI router for the admin bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request

from app.application.admin.dtos import EditProfileCommand, LoginCommand
from app.application.admin.edit_admin_profile import EditAdminProfileUseCase
from app.application.admin.get_admin_profile import GetAdminProfileUseCase
from app.application.admin.login_admin import LoginAdminUseCase
from app.domain.admin.entities import AdminIdentity
from app.interfaces.admin.dependencies import (
    get_admin_profile_use_case,
    get_edit_admin_profile_use_case,
    get_login_use_case,
    require_admin,
)
from app.interfaces.admin.schemas import (
    AdminItem,
    EditProfileRequest,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
)
from app.interfaces.showcase.schemas import ErrorResponse, MessageResponse
from app.shared.security.rate_limiting import LOGIN_RATE_LIMIT, limiter

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
    summary="Admin login",
    description="Verify credentials and return a 7-day bearer token.",
)
@limiter.limit(LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    body: LoginRequest,
    use_case: LoginAdminUseCase = Depends(get_login_use_case),
) -> LoginResponse:
    """Log an admin in."""
    result = await use_case.execute(
        LoginCommand(email=body.admin_email, password=body.admin_password)
    )
    return LoginResponse(
        message="Login successful",
        token=result.token,
        admin=AdminItem.from_profile(result.admin),
    )


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Current admin profile",
)
async def get_profile(
    admin: AdminIdentity = Depends(require_admin),
    use_case: GetAdminProfileUseCase = Depends(get_admin_profile_use_case),
) -> ProfileResponse:
    profile = await use_case.execute(admin.admin_id)
    return ProfileResponse(admin=AdminItem.from_profile(profile))


@router.put(
    "/editprofile",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Edit the current admin's name",
)
async def edit_profile(
    body: EditProfileRequest,
    admin: AdminIdentity = Depends(require_admin),
    use_case: EditAdminProfileUseCase = Depends(get_edit_admin_profile_use_case),
) -> MessageResponse:
    await use_case.execute(
        EditProfileCommand(
            admin_id=admin.admin_id,
            firstname=body.admin_firstname,
            lastname=body.admin_lastname,
        )
    )
    return MessageResponse(message="Profile updated successfully")
