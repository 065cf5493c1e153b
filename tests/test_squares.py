"""Tests for roof-size normalization to squares."""

from __future__ import annotations

import math

from forman.pricing.squares import normalize_squares, sqft_to_squares, squares_for_inputs
from forman.schemas.roofing import QuoteInputs, RoofSizeUnit


class TestNormalizeSquares:
    def test_sqft_converts(self) -> None:
        assert normalize_squares(2400, "sqft") == 24

    def test_squares_unchanged(self) -> None:
        assert normalize_squares(24, "squares") == 24

    def test_accepts_enum(self) -> None:
        assert normalize_squares(1850, RoofSizeUnit.SQFT) == 18.5

    def test_no_rounding(self) -> None:
        """Rounding happens later in the engine, not here."""
        assert normalize_squares(2433.7, "sqft") == 2433.7 / 100

    def test_non_positive_is_zero(self) -> None:
        assert normalize_squares(0, "squares") == 0.0
        assert normalize_squares(-12, "sqft") == 0.0

    def test_non_finite_is_zero(self) -> None:
        assert normalize_squares(math.inf, "squares") == 0.0
        assert normalize_squares(math.nan, "sqft") == 0.0


class TestHelpers:
    def test_sqft_to_squares(self) -> None:
        assert sqft_to_squares(100) == 1

    def test_squares_for_inputs(self) -> None:
        inputs = QuoteInputs(
            customer_name="Dana Reyes",
            roof_size_value=3200,
            roof_size_unit="sqft",
            pitch="6/12",
            stories=2,
            tearoff=False,
        )
        assert squares_for_inputs(inputs) == 32
