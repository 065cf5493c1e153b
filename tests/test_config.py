"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from forman.config import DatabaseSettings, Settings


class TestSettings:
    def test_log_level_normalized(self) -> None:
        assert Settings(log_level="warning").log_level == "WARNING"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_pricing_defaults(self) -> None:
        pricing = Settings().pricing
        assert pricing.target_margin_pct == 30.0
        assert pricing.quote_expiration_days == 14
        assert pricing.min_deposit_cents == 50

    def test_is_production(self) -> None:
        assert Settings(environment="production").is_production is True
        assert Settings(environment="development").is_production is False


class TestDatabaseSettings:
    def test_sync_url(self) -> None:
        db = DatabaseSettings(database_url="postgresql+asyncpg://u:p@db:5432/forman")
        assert db.database_url_sync == "postgresql://u:p@db:5432/forman"

    def test_pool_defaults(self) -> None:
        db = DatabaseSettings()
        assert db.db_pool_size == 10
        assert db.db_max_overflow == 20
