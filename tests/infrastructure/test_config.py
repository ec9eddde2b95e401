"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.config import Settings


class TestSettings:

    def test_defaults(self):
        cfg = Settings.from_env({})
        assert cfg.shipping_fee == Money.of("50")
        assert cfg.jwt_expires_min == 60
        assert cfg.log_level == "INFO"
        assert cfg.data_dir.name == "data"

    def test_overrides(self):
        cfg = Settings.from_env({
            "STOREFRONT_DATA_DIR": "/tmp/store",
            "STOREFRONT_SHIPPING_FEE": "75.50",
            "STOREFRONT_JWT_EXPIRES_MIN": "5",
            "STOREFRONT_LOG_LEVEL": "debug",
        })
        assert cfg.data_dir == Path("/tmp/store")
        assert cfg.shipping_fee == Money.of("75.50")
        assert cfg.jwt_expires_min == 5
        assert cfg.log_level == "DEBUG"

    def test_bad_shipping_fee(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Settings.from_env({"STOREFRONT_SHIPPING_FEE": "free"})

    def test_bad_expiry(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Settings.from_env({"STOREFRONT_JWT_EXPIRES_MIN": "soon"})

    def test_bad_log_level(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings.from_env({"STOREFRONT_LOG_LEVEL": "LOUD"})
