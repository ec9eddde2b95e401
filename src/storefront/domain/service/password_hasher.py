"""Password hashing port.

The domain only ever sees hashes; the concrete algorithm lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of *password*."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if *password* matches *password_hash*."""
