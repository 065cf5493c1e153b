"""Tests for forman/quotes/service.py — pricing and creating quotes."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from forman.errors import PricingCalculationError, RateCardNotConfiguredError
from forman.models.quote import QuoteRecord
from forman.quotes.service import create_quote, price_quote
from forman.schemas.roofing import OneTimeCustomItem
from tests.factories import make_args, make_rate_card, zero_rate_card

USER_ID = uuid.uuid4()
NOW = datetime(2026, 10, 17, 9, 30, tzinfo=UTC)


@pytest.fixture
def mock_db():
    """Create a mock async DB session."""
    db = AsyncMock()
    db.add = MagicMock()
    db.flush = AsyncMock()
    return db


class TestPriceQuote:
    @pytest.mark.asyncio
    async def test_prices_with_loaded_rates(self, mock_db):
        with (
            patch("forman.quotes.service.load_roofing_rate_card", AsyncMock(return_value=make_rate_card())),
            patch("forman.quotes.service.load_saved_custom_items", AsyncMock(return_value=[])),
        ):
            result = await price_quote(mock_db, USER_ID, make_args())

        assert result.subtotal == 4560.0
        assert result.markup_amount == 684.0
        assert result.total == 5244.0

    @pytest.mark.asyncio
    async def test_missing_rate_card_propagates(self, mock_db):
        load = AsyncMock(side_effect=RateCardNotConfiguredError(str(USER_ID), "roofing"))
        with patch("forman.quotes.service.load_roofing_rate_card", load):
            with pytest.raises(RateCardNotConfiguredError):
                await price_quote(mock_db, USER_ID, make_args())

    @pytest.mark.asyncio
    async def test_zero_rate_card_still_prices(self, mock_db):
        with (
            patch("forman.quotes.service.load_roofing_rate_card", AsyncMock(return_value=zero_rate_card())),
            patch("forman.quotes.service.load_saved_custom_items", AsyncMock(return_value=[])),
        ):
            result = await price_quote(mock_db, USER_ID, make_args())

        assert result.total == 0.0

    @pytest.mark.asyncio
    async def test_engine_failure_wrapped(self, mock_db):
        with (
            patch("forman.quotes.service.load_roofing_rate_card", AsyncMock(return_value=make_rate_card())),
            patch("forman.quotes.service.load_saved_custom_items", AsyncMock(return_value=[])),
            patch("forman.quotes.service.calculate_roofing_quote", side_effect=TypeError("bad rate")),
        ):
            with pytest.raises(PricingCalculationError) as exc_info:
                await price_quote(mock_db, USER_ID, make_args())

        assert exc_info.value.user_message == "Pricing calculation failed. Check inputs and rates."

    @pytest.mark.asyncio
    async def test_overflowing_totals_become_pricing_error(self, mock_db):
        huge = make_rate_card(labor_per_square=1e308)
        with (
            patch("forman.quotes.service.load_roofing_rate_card", AsyncMock(return_value=huge)),
            patch("forman.quotes.service.load_saved_custom_items", AsyncMock(return_value=[])),
        ):
            with pytest.raises(PricingCalculationError):
                await price_quote(mock_db, USER_ID, make_args())

    @pytest.mark.asyncio
    async def test_arithmetic_error_wrapped(self, mock_db):
        with (
            patch("forman.quotes.service.load_roofing_rate_card", AsyncMock(return_value=make_rate_card())),
            patch("forman.quotes.service.load_saved_custom_items", AsyncMock(return_value=[])),
            patch("forman.quotes.service.calculate_roofing_quote", side_effect=OverflowError("too big")),
        ):
            with pytest.raises(PricingCalculationError):
                await price_quote(mock_db, USER_ID, make_args())


class TestCreateQuote:
    @pytest.mark.asyncio
    async def test_creates_draft_with_snapshot(self, mock_db):
        with (
            patch("forman.quotes.service.load_roofing_rate_card", AsyncMock(return_value=make_rate_card())),
            patch("forman.quotes.service.load_saved_custom_items", AsyncMock(return_value=[])),
        ):
            quote = await create_quote(mock_db, USER_ID, make_args(), now=NOW)

        assert isinstance(quote, QuoteRecord)
        assert quote.status == "draft"
        assert quote.customer_name == "Jane Doe"
        assert quote.subtotal == Decimal("4560")
        assert quote.tax == Decimal("0")
        assert quote.total == Decimal("5244")
        assert quote.pricing_json["markup_amount"] == 684.0
        assert quote.line_items_json[0]["name"] == "Labor"
        assert quote.inputs_json["roof_size_unit"] == "squares"
        assert quote.expires_at == NOW + timedelta(days=14)
        assert quote.share_token
        mock_db.add.assert_called_once_with(quote)
        mock_db.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_share_tokens_unique(self, mock_db):
        with (
            patch("forman.quotes.service.load_roofing_rate_card", AsyncMock(return_value=make_rate_card())),
            patch("forman.quotes.service.load_saved_custom_items", AsyncMock(return_value=[])),
        ):
            first = await create_quote(mock_db, USER_ID, make_args(), now=NOW)
            second = await create_quote(mock_db, USER_ID, make_args(), now=NOW)

        assert first.share_token != second.share_token

    @pytest.mark.asyncio
    async def test_saves_flagged_one_time_items(self, mock_db):
        keep = OneTimeCustomItem(name="Chimney flashing", pricing_type="flat", unit_price=275, save_to_account=True)
        skip = OneTimeCustomItem(name="Dumpster", pricing_type="flat", unit_price=400)
        args = make_args(selections={"one_time_custom_items": [keep, skip]})
        create_item = AsyncMock()

        with (
            patch("forman.quotes.service.load_roofing_rate_card", AsyncMock(return_value=make_rate_card())),
            patch("forman.quotes.service.load_saved_custom_items", AsyncMock(return_value=[])),
            patch("forman.quotes.service.create_custom_item", create_item),
        ):
            quote = await create_quote(mock_db, USER_ID, args, now=NOW)

        create_item.assert_awaited_once()
        payload = create_item.await_args.args[2]
        assert payload.name == "Chimney flashing"
        assert payload.unit_price == 275
        assert quote.total == Decimal(str(quote.pricing_json["total"]))

    @pytest.mark.asyncio
    async def test_rate_card_error_stores_nothing(self, mock_db):
        load = AsyncMock(side_effect=RateCardNotConfiguredError(str(USER_ID), "roofing"))
        with patch("forman.quotes.service.load_roofing_rate_card", load):
            with pytest.raises(RateCardNotConfiguredError):
                await create_quote(mock_db, USER_ID, make_args(), now=NOW)

        mock_db.add.assert_not_called()
