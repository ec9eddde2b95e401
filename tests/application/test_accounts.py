"""Integration tests for registration and authentication."""

import pytest

from storefront.application.authenticate_user import AuthenticateUserHandler
from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import UnauthenticatedError, ValidationError
from storefront.domain.model.user import Role
from tests.fakes import FakePasswordHasher, FakeUserRepository


def _setup():
    users = FakeUserRepository()
    hasher = FakePasswordHasher()
    return RegisterUserHandler(users, hasher), AuthenticateUserHandler(users, hasher), users


class TestRegister:

    def test_password_is_stored_hashed(self):
        register, _, users = _setup()
        dto = register.handle("Alice", "Alice@Example.com", "secret1")

        stored = users.get_by_id(dto.id)
        assert stored.email == "alice@example.com"
        assert stored.password_hash != "secret1"
        assert stored.role == Role.USER
        assert stored.cart.is_empty

    def test_duplicate_email_rejected(self):
        register, _, _ = _setup()
        register.handle("Alice", "alice@example.com", "secret1")
        with pytest.raises(ValidationError, match="already exists"):
            register.handle("Other", "ALICE@example.com", "secret2")

    def test_short_password_rejected(self):
        register, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least"):
            register.handle("Alice", "alice@example.com", "abc")

    def test_admin_role(self):
        register, _, _ = _setup()
        assert register.handle("Root", "root@example.com", "secret1", role="admin").role == "admin"


class TestAuthenticate:

    def test_valid_credentials(self):
        register, authenticate, _ = _setup()
        register.handle("Alice", "alice@example.com", "secret1")
        assert authenticate.handle("alice@example.com", "secret1").name == "Alice"

    def test_wrong_password(self):
        register, authenticate, _ = _setup()
        register.handle("Alice", "alice@example.com", "secret1")
        with pytest.raises(UnauthenticatedError, match="Invalid credentials"):
            authenticate.handle("alice@example.com", "nope")

    def test_unknown_email(self):
        _, authenticate, _ = _setup()
        with pytest.raises(UnauthenticatedError):
            authenticate.handle("ghost@example.com", "secret1")
