"""Per-user mutual exclusion for cart mutations and checkout.

Every operation that reads and then rewrites a user's cart holds that
user's lock for the whole read-modify-write, so two browser tabs placing
the same cart twice produce one order, and two concurrent ``add`` calls
never lose an increment.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class UserLockRegistry:

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def _lock_for(self, user_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[user_id] = lock
            return lock

    @contextmanager
    def hold(self, user_id: str) -> Iterator[None]:
        lock = self._lock_for(user_id)
        with lock:
            yield


# Shared by every handler built through the composition root.
default_user_locks = UserLockRegistry()
