"""
Dependency injection for the admin bounded context.

Also provides ``require_admin``, the bearer-token guard used by every
protected route of the API.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine

from app.application.admin.edit_admin_profile import EditAdminProfileUseCase
from app.application.admin.get_admin_profile import GetAdminProfileUseCase
from app.application.admin.login_admin import LoginAdminUseCase
from app.core.config import settings
from app.domain.admin.entities import AdminIdentity
from app.domain.admin.errors import AuthenticationError
from app.domain.admin.ports import AdminRepository, TokenService
from app.infrastructure.admin.admin_repository import SqlAdminRepository
from app.infrastructure.admin.security import BcryptPasswordHasher, JwtTokenService
from app.interfaces.resources import get_engine

bearer_scheme = HTTPBearer(auto_error=False)


def get_admin_repository(engine: AsyncEngine = Depends(get_engine)) -> AdminRepository:
    return SqlAdminRepository(engine)


def get_token_service() -> TokenService:
    """Build the JWT token service from application settings."""
    return JwtTokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_days=settings.jwt_expire_days,
    )


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: TokenService = Depends(get_token_service),
) -> AdminIdentity:
    """Resolve the calling admin from the ``Authorization: Bearer`` header.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")
    return token_service.decode(credentials.credentials)


def get_login_use_case(
    admin_repo: AdminRepository = Depends(get_admin_repository),
    token_service: TokenService = Depends(get_token_service),
) -> LoginAdminUseCase:
    return LoginAdminUseCase(
        admin_repo=admin_repo,
        password_hasher=BcryptPasswordHasher(),
        token_service=token_service,
    )


def get_admin_profile_use_case(
    admin_repo: AdminRepository = Depends(get_admin_repository),
) -> GetAdminProfileUseCase:
    return GetAdminProfileUseCase(admin_repo=admin_repo)


def get_edit_admin_profile_use_case(
    admin_repo: AdminRepository = Depends(get_admin_repository),
) -> EditAdminProfileUseCase:
    return EditAdminProfileUseCase(admin_repo=admin_repo)
