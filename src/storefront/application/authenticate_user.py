"""Application service: Authenticate User use case."""

from __future__ import annotations

from storefront.application.dto import UserDTO
from storefront.application.views import user_dto
from storefront.domain.exceptions import UnauthenticatedError
from storefront.domain.model.user import normalize_email
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.password_hasher import PasswordHasher


class AuthenticateUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(self, email: str, password: str) -> UserDTO:
        """Check credentials. Unknown email and wrong password look the same."""
        user = self._user_repo.get_by_email(normalize_email(email))
        if user is None or not self._hasher.verify(password, user.password_hash):
            raise UnauthenticatedError("Invalid credentials")
        return user_dto(user)
