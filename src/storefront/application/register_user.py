"""Application service: Register User use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import UserDTO
from storefront.application.views import user_dto
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import Role, User, normalize_email
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher

logger = structlog.get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(self, name: str, email: str, password: str, role: str = "user") -> UserDTO:
        """Create an account with a hashed password and an empty cart."""
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        try:
            parsed_role = Role(role)
        except ValueError as exc:
            raise ValidationError(f"Unknown role '{role}'") from exc

        if self._user_repo.get_by_email(normalize_email(email)) is not None:
            raise ValidationError("User already exists")

        user = User.register(
            name=name,
            email=email,
            password_hash=self._hasher.hash(password),
            role=parsed_role,
        )
        self._user_repo.add(user)
        logger.info("user_registered", user_id=user.id, role=user.role.value)
        return user_dto(user)
