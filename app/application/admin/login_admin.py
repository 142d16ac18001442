"""
Use case: Log an admin in.

Input: LoginCommand (email, password)
Output: LoginResult (token, profile)
Side effects: None.
Failure cases: AdminValidationError, InvalidCredentialsError.
"""

import logging

from app.application.admin.dtos import AdminProfile, LoginCommand, LoginResult
from app.domain.admin.entities import AdminAccount
from app.domain.admin.errors import AdminValidationError, InvalidCredentialsError
from app.domain.admin.ports import AdminRepository, PasswordHasher, TokenService

logger = logging.getLogger(__name__)


def to_profile(admin: AdminAccount) -> AdminProfile:
    """Strip the password hash from an account."""
    return AdminProfile(
        admin_id=admin.admin_id,
        firstname=admin.firstname,
        lastname=admin.lastname,
        email=admin.email,
        created_at=admin.created_at,
    )


class LoginAdminUseCase:
    """Verifies credentials and issues a session token.

    An unknown email and a wrong password raise the same error.
    """

    def __init__(
        self,
        admin_repo: AdminRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._admin_repo = admin_repo
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def execute(self, command: LoginCommand) -> LoginResult:
        if not command.email or not command.password:
            raise AdminValidationError("Email and password are required")

        admin = await self._admin_repo.get_by_email(command.email.strip())
        if admin is None or not self._password_hasher.verify(
            command.password, admin.password_hash
        ):
            logger.warning("Failed admin login")
            raise InvalidCredentialsError()

        logger.info("Admin id=%s logged in", admin.admin_id)
        return LoginResult(token=self._token_service.issue(admin), admin=to_profile(admin))
