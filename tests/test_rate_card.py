"""Tests for rate-card defaults, zero detection and parsing."""

from __future__ import annotations

import pytest

from forman.errors import RateCardInvalidError
from forman.pricing.rate_card import (
    ROOFING_RATE_DEFAULTS,
    default_rate_card,
    is_zero_rate_card,
    parse_rate_card,
)
from tests.factories import make_rate_card, zero_rate_card


class TestDefaults:
    def test_default_rate_card(self) -> None:
        card = default_rate_card()
        assert card.labor_per_square == 55
        assert card.minimum_job_price == 4500
        assert card.drip_edge_per_lf == 2.25

    def test_defaults_cover_every_field(self) -> None:
        assert set(ROOFING_RATE_DEFAULTS) == set(default_rate_card().model_dump())


class TestIsZeroRateCard:
    def test_all_zero(self) -> None:
        assert is_zero_rate_card(zero_rate_card()) is True

    def test_one_non_zero(self) -> None:
        assert is_zero_rate_card(zero_rate_card(permit_fee_flat=1)) is False

    def test_defaults_not_zero(self) -> None:
        assert is_zero_rate_card(make_rate_card()) is False


class TestParseRateCard:
    def test_valid_blob(self) -> None:
        card = parse_rate_card(dict(ROOFING_RATE_DEFAULTS))
        assert card.shingles_per_square == 115

    def test_invalid_blob(self) -> None:
        with pytest.raises(RateCardInvalidError) as exc_info:
            parse_rate_card({**ROOFING_RATE_DEFAULTS, "markup_percent": 900})
        assert "rate card is invalid" in exc_info.value.user_message

    def test_not_a_mapping(self) -> None:
        with pytest.raises(RateCardInvalidError):
            parse_rate_card(None)
