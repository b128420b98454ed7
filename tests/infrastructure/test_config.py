"""Tests for environment-driven settings and logging levels."""

from decimal import Decimal
from pathlib import Path

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import get_log_level


class TestSettings:

    def test_defaults(self):
        settings = Settings.from_env({})
        policy = settings.delivery_policy()
        assert settings.currency == "INR"
        assert settings.environment == "development"
        assert policy.free_shipping_threshold.amount == Decimal("5000")
        assert policy.flat_fee.amount == Decimal("250")

    def test_overrides(self, tmp_path):
        settings = Settings.from_env({
            "STOREFRONT_DATA_DIR": str(tmp_path),
            "STOREFRONT_CURRENCY": "usd",
            "STOREFRONT_FREE_SHIPPING_THRESHOLD": "100",
            "STOREFRONT_DELIVERY_FEE": "7.5",
            "STOREFRONT_ENV": "TEST",
        })
        assert settings.data_dir == Path(tmp_path)
        assert settings.currency == "USD"
        assert settings.environment == "test"
        assert str(settings.delivery_policy().flat_fee) == "$7.50"

    def test_invalid_fee_rejected_at_load(self):
        with pytest.raises(ValidationError, match="Invalid delivery settings"):
            Settings.from_env({"STOREFRONT_DELIVERY_FEE": "free"})


class TestLogLevel:

    def test_level_follows_environment(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert get_log_level("production") == "INFO"
        assert get_log_level("development") == "DEBUG"
        assert get_log_level("test") == "WARNING"

    def test_explicit_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        assert get_log_level("development") == "ERROR"
