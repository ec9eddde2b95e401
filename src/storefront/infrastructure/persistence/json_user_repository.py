"""JSON-file-backed implementation of UserRepository.

The cart is stored inside the user document, next to its version.
``save`` with an expected version is a compare-and-swap on that
version, performed while holding the file lock.
"""

from __future__ import annotations

from pathlib import Path

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._file.load():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        for raw in self._file.load():
            if raw["email"] == email:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def add(self, user: User) -> User:
        with self._file.lock:
            records = self._file.load()
            self._check_email_free(records, user)
            ids = [int(raw["id"]) for raw in records if str(raw["id"]).isdigit()]
            user.id = str(max(ids, default=0) + 1)
            records.append(self._to_raw(user))
            self._file.persist(records)
        return user

    def save(self, user: User, expected_version: int | None = None) -> None:
        with self._file.lock:
            records = self._file.load()
            self._check_email_free(records, user)
            for i, raw in enumerate(records):
                if raw["id"] == user.id:
                    stored_version = raw.get("cart_version", 0)
                    if expected_version is not None and stored_version != expected_version:
                        raise ConflictError(
                            f"Cart for user '{user.id}' changed concurrently "
                            f"(expected version {expected_version}, found {stored_version})"
                        )
                    records[i] = self._to_raw(user)
                    break
            else:
                if expected_version is not None:
                    raise ConflictError(f"User '{user.id}' no longer exists")
                records.append(self._to_raw(user))
            self._file.persist(records)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _check_email_free(records: list[dict], user: User) -> None:
        for raw in records:
            if raw["email"] == user.email and raw["id"] != user.id:
                raise ConflictError("User already exists")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "password_hash": user.password_hash,
            "role": user.role.value,
            "cart_version": user.cart.version,
            "cart": [
                {"product_id": line.product_id, "quantity": line.quantity.value}
                for line in user.cart.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        cart = Cart(
            lines=[
                CartLine(product_id=c["product_id"], quantity=Quantity(c["quantity"]))
                for c in raw.get("cart", [])
            ],
            version=raw.get("cart_version", 0),
        )
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            password_hash=raw["password_hash"],
            role=Role(raw.get("role", Role.USER.value)),
            cart=cart,
        )
