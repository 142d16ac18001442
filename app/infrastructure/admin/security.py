"""
Adapters: password hashing (bcrypt) and session tokens (PyJWT).

Implements PasswordHasher and TokenService ports.
Tokens are HS256 JWTs carrying ``adminId``, ``email`` and ``role``.
"""

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from app.domain.admin.entities import AdminAccount, AdminIdentity
from app.domain.admin.errors import AuthenticationError
from app.domain.admin.ports import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt with a fresh salt per hash."""

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash.
            logger.warning("Stored admin password is not a valid bcrypt hash")
            return False


class JwtTokenService(TokenService):
    """Issues and validates signed admin session tokens.

    Args:
        secret: HMAC signing secret.
        algorithm: JWT algorithm.
        expire_days: Token lifetime in days.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_days: int = 7) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expire_days = expire_days

    def issue(self, admin: AdminAccount) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "adminId": admin.admin_id,
            "email": admin.email,
            "role": ADMIN_ROLE,
            "iat": now,
            "exp": now + timedelta(days=self._expire_days),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> AdminIdentity:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("Invalid token") from exc

        admin_id = payload.get("adminId")
        if payload.get("role") != ADMIN_ROLE or not isinstance(admin_id, int):
            raise AuthenticationError("Invalid token")
        return AdminIdentity(admin_id=admin_id, email=payload.get("email"))
