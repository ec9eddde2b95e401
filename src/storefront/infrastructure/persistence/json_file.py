"""A JSON array on disk, shared by every JSON repository.

Each path gets one process-wide re-entrant lock so a repository can hold
it across a read-check-write sequence.  Writes go to a temporary file
that replaces the target in one step, so readers never see a half
written document.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

_locks_guard = threading.Lock()
_locks: dict[Path, threading.RLock] = {}


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        lock = _locks.get(path)
        if lock is None:
            lock = threading.RLock()
            _locks[path] = lock
        return lock


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self.path = file_path.resolve()
        self.lock = _lock_for(self.path)
        self._ensure_file()

    def load(self) -> list[dict]:
        with self.lock:
            return json.loads(self.path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        with self.lock:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise

    def _ensure_file(self) -> None:
        with self.lock:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.write_text("[]", encoding="utf-8")
