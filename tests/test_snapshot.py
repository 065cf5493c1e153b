"""Tests for the persisted pricing snapshot."""

from __future__ import annotations

from forman.pricing.engine import calculate_roofing_quote
from forman.quotes.snapshot import build_pricing_snapshot, line_items_json
from forman.schemas.roofing import RateCard
from tests.factories import make_args


class TestPricingSnapshot:
    def test_totals_copied_verbatim(self, rate_card: RateCard) -> None:
        pricing = calculate_roofing_quote(make_args(roof_size_value=3), rate_card, [])
        assert build_pricing_snapshot(pricing) == {
            "subtotal": 570.0,
            "tax": 0.0,
            "total": 4500.0,
            "squares": 3.0,
            "markup_percent": 15.0,
            "markup_amount": 85.5,
            "total_before_minimum": 655.5,
        }

    def test_line_items_serialized_in_order(self, rate_card: RateCard) -> None:
        pricing = calculate_roofing_quote(make_args(roof_size_value=3), rate_card, [])
        items = line_items_json(pricing)
        assert [item["name"] for item in items][0] == "Labor"
        assert items[-1]["category"] == "adjustment"
        assert items[0] == {
            "name": "Labor",
            "category": "core",
            "quantity": 3.0,
            "unit": "sq",
            "unit_price": 55.0,
            "subtotal": 165.0,
            "is_custom": False,
        }
