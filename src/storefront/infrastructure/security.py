"""Password hashing and bearer tokens.

Passwords are hashed with passlib's PBKDF2-SHA256; tokens are HS256
JWTs carrying the user id (``sub``) and role.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from storefront.domain.authorization import Subject
from storefront.domain.exceptions import UnauthenticatedError
from storefront.domain.model.user import Role
from storefront.domain.service.password_hasher import PasswordHasher

_ALGORITHM = "HS256"


class PasslibPasswordHasher(PasswordHasher):

    def __init__(self) -> None:
        self._context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._context.verify(password, password_hash)
        except ValueError:
            # Unrecognised or corrupt hash
            return False


class TokenService:

    def __init__(self, secret: str, expires_min: int = 60) -> None:
        self._secret = secret
        self._expires = timedelta(minutes=expires_min)

    def issue(self, user_id: str, role: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "role": role,
            "iat": now,
            "exp": now + self._expires,
        }
        return jwt.encode(payload, self._secret, algorithm=_ALGORITHM)

    def resolve(self, token: str) -> Subject:
        """Decode a token into a Subject or raise UnauthenticatedError."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[_ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise UnauthenticatedError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise UnauthenticatedError("Invalid token") from exc

        try:
            return Subject(user_id=str(payload["sub"]), role=Role(payload.get("role", "user")))
        except (KeyError, ValueError) as exc:
            raise UnauthenticatedError("Invalid token") from exc
