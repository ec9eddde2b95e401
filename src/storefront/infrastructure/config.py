"""Runtime configuration, read from environment variables.

| Variable                     | Default                |
|------------------------------|------------------------|
| STOREFRONT_DATA_DIR          | <project root>/data    |
| STOREFRONT_SHIPPING_FEE      | 50                     |
| STOREFRONT_JWT_SECRET        | dev-secret-change-me   |
| STOREFRONT_JWT_EXPIRES_MIN   | 60                     |
| STOREFRONT_LOG_LEVEL         | INFO                   |
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    shipping_fee: Money
    jwt_secret: str
    jwt_expires_min: int
    log_level: str

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        expires_raw = env.get("STOREFRONT_JWT_EXPIRES_MIN", "60")
        try:
            expires = int(expires_raw)
        except ValueError as exc:
            raise ValidationError(
                f"STOREFRONT_JWT_EXPIRES_MIN must be an integer, got {expires_raw!r}"
            ) from exc
        if expires <= 0:
            raise ValidationError("STOREFRONT_JWT_EXPIRES_MIN must be positive")

        log_level = env.get("STOREFRONT_LOG_LEVEL", "INFO").upper()
        if log_level not in _LOG_LEVELS:
            raise ValidationError(f"Unknown log level {log_level!r}")

        return Settings(
            data_dir=Path(env.get("STOREFRONT_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            shipping_fee=Money.of(env.get("STOREFRONT_SHIPPING_FEE", "50")),
            jwt_secret=env.get("STOREFRONT_JWT_SECRET", "dev-secret-change-me"),
            jwt_expires_min=expires,
            log_level=log_level,
        )
