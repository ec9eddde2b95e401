"""User aggregate: account identity, role and the embedded cart."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart


class Role(Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass
class User:
    """Aggregate root for accounts.

    The cart shares the user's consistency boundary: a cart mutation and
    a user save are one unit.  ``password_hash`` is whatever the password
    hasher produced; plaintext never reaches this object.
    """

    id: str | None
    name: str
    email: str
    password_hash: str
    role: Role = Role.USER
    cart: Cart = field(default_factory=Cart)

    @staticmethod
    def register(
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.USER,
    ) -> User:
        """Create a new account, enforcing the registration rules.

        The ID is assigned by ``UserRepository.add``.
        """
        if not name or not name.strip():
            raise ValidationError("Name is required")
        email = normalize_email(email)
        if "@" not in email:
            raise ValidationError(f"Invalid email address: '{email}'")
        if not password_hash:
            raise ValidationError("Password hash is required")
        return User(
            id=None,
            name=name.strip(),
            email=email,
            password_hash=password_hash,
            role=role,
        )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()
