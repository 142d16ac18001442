"""
Tests for the admin context: use cases, bcrypt hasher, JWT tokens
and the SQL admin repository.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import jwt
import pytest

from app.application.admin.dtos import EditProfileCommand, LoginCommand
from app.application.admin.edit_admin_profile import EditAdminProfileUseCase
from app.application.admin.get_admin_profile import GetAdminProfileUseCase
from app.application.admin.login_admin import LoginAdminUseCase
from app.domain.admin.entities import AdminAccount
from app.domain.admin.errors import (
    AdminNotFoundError,
    AdminValidationError,
    AuthenticationError,
    InvalidCredentialsError,
)
from app.infrastructure.admin.admin_repository import SqlAdminRepository
from app.infrastructure.admin.security import BcryptPasswordHasher, JwtTokenService

SECRET = "showcase-test-secret-0123456789abcdef"
PASSWORD = "correct horse battery"
HASHER = BcryptPasswordHasher()
PASSWORD_HASH = HASHER.hash(PASSWORD)

ADMIN = AdminAccount(
    admin_id=7,
    firstname="Ada",
    lastname="Lovelace",
    email="ada@example.com",
    password_hash=PASSWORD_HASH,
)


@pytest.fixture
def admin_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_email.return_value = ADMIN
    repo.get.return_value = ADMIN
    repo.update_name.return_value = True
    return repo


@pytest.fixture
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=SECRET)


class TestBcryptPasswordHasher:
    def test_hash_verifies(self) -> None:
        assert PASSWORD_HASH != PASSWORD
        assert HASHER.verify(PASSWORD, PASSWORD_HASH)
        assert not HASHER.verify("wrong", PASSWORD_HASH)

    def test_non_bcrypt_hash_does_not_verify(self) -> None:
        assert not HASHER.verify(PASSWORD, "plain-text")


class TestJwtTokenService:
    """Tests for admin session tokens."""

    def test_round_trip_identity(self, tokens) -> None:
        identity = tokens.decode(tokens.issue(ADMIN))
        assert identity.admin_id == ADMIN.admin_id
        assert identity.email == ADMIN.email

    def test_claims_and_lifetime(self, tokens) -> None:
        payload = jwt.decode(tokens.issue(ADMIN), SECRET, algorithms=["HS256"])
        assert payload["role"] == "admin"
        lifetime = payload["exp"] - payload["iat"]
        assert lifetime == int(timedelta(days=7).total_seconds())

    def test_expired_token_rejected(self, tokens) -> None:
        past = datetime.now(timezone.utc) - timedelta(days=1)
        token = jwt.encode(
            {"adminId": 7, "role": "admin", "exp": past}, SECRET, algorithm="HS256"
        )
        with pytest.raises(AuthenticationError, match="expired"):
            tokens.decode(token)

    def test_wrong_secret_rejected(self) -> None:
        token = JwtTokenService(secret="another-test-secret-0123456789abcdef").issue(ADMIN)
        with pytest.raises(AuthenticationError):
            JwtTokenService(secret=SECRET).decode(token)

    def test_non_admin_role_rejected(self) -> None:
        token = jwt.encode({"adminId": 7, "role": "guest"}, SECRET, algorithm="HS256")
        with pytest.raises(AuthenticationError):
            JwtTokenService(secret=SECRET).decode(token)


class TestLoginAdmin:
    """Tests for LoginAdminUseCase."""

    @pytest.mark.asyncio
    async def test_valid_credentials(self, admin_repo, tokens) -> None:
        use_case = LoginAdminUseCase(admin_repo, HASHER, tokens)
        result = await use_case.execute(LoginCommand(email=" ada@example.com ", password=PASSWORD))

        admin_repo.get_by_email.assert_awaited_once_with("ada@example.com")
        assert result.admin.admin_id == 7
        assert not hasattr(result.admin, "password_hash")
        assert tokens.decode(result.token).admin_id == 7

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(
        self, admin_repo, tokens
    ) -> None:
        use_case = LoginAdminUseCase(admin_repo, HASHER, tokens)
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await use_case.execute(LoginCommand(email="ada@example.com", password="nope"))

        admin_repo.get_by_email.return_value = None
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await use_case.execute(LoginCommand(email="who@example.com", password=PASSWORD))

        assert wrong_password.value.message == unknown_email.value.message

    @pytest.mark.asyncio
    async def test_missing_fields(self, admin_repo, tokens) -> None:
        with pytest.raises(AdminValidationError):
            await LoginAdminUseCase(admin_repo, HASHER, tokens).execute(
                LoginCommand(email="", password="")
            )
        admin_repo.get_by_email.assert_not_awaited()


class TestAdminProfile:
    """Tests for reading and editing the admin profile."""

    @pytest.mark.asyncio
    async def test_profile(self, admin_repo) -> None:
        profile = await GetAdminProfileUseCase(admin_repo).execute(7)
        assert (profile.firstname, profile.email) == ("Ada", "ada@example.com")

    @pytest.mark.asyncio
    async def test_profile_of_deleted_admin(self, admin_repo) -> None:
        admin_repo.get.return_value = None
        with pytest.raises(AdminNotFoundError):
            await GetAdminProfileUseCase(admin_repo).execute(7)

    @pytest.mark.asyncio
    async def test_edit_trims_names(self, admin_repo) -> None:
        await EditAdminProfileUseCase(admin_repo).execute(
            EditProfileCommand(admin_id=7, firstname=" Ada ", lastname=" King ")
        )
        admin_repo.update_name.assert_awaited_once_with(7, "Ada", "King")

    @pytest.mark.asyncio
    async def test_edit_requires_both_names(self, admin_repo) -> None:
        with pytest.raises(AdminValidationError):
            await EditAdminProfileUseCase(admin_repo).execute(
                EditProfileCommand(admin_id=7, firstname="Ada", lastname=" ")
            )
        admin_repo.update_name.assert_not_awaited()


class TestSqlAdminRepository:
    """Tests for the SQL admin repository."""

    @pytest.mark.asyncio
    async def test_add_get_and_rename(self, engine) -> None:
        repo = SqlAdminRepository(engine)
        admin_id = await repo.add("Ada", "Lovelace", "ada@example.com", PASSWORD_HASH)

        by_email = await repo.get_by_email("ada@example.com")
        assert by_email.admin_id == admin_id
        assert HASHER.verify(PASSWORD, by_email.password_hash)

        assert await repo.update_name(admin_id, "Augusta", "King")
        renamed = await repo.get(admin_id)
        assert (renamed.firstname, renamed.lastname) == ("Augusta", "King")

    @pytest.mark.asyncio
    async def test_missing_admin(self, engine) -> None:
        repo = SqlAdminRepository(engine)
        assert await repo.get(404) is None
        assert await repo.get_by_email("nobody@example.com") is None
        assert not await repo.update_name(404, "A", "B")
