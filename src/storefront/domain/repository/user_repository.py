"""Abstract repository for User aggregate (cart included)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user with their cart, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by (normalised) email, or None."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def add(self, user: User) -> User:
        """Persist a new account, assigning its ID.

        Raises ConflictError if another account already uses the email.
        """

    @abstractmethod
    def save(self, user: User, expected_version: int | None = None) -> None:
        """Persist the full aggregate.

        When *expected_version* is given the stored cart version must
        still equal it, otherwise ConflictError is raised and nothing is
        written.  An email already used by another account is also a
        ConflictError.
        """
