"""Roofing pricing — squares normalization, line items, totals."""

from forman.pricing.engine import calculate_roofing_quote, require_finite_totals
from forman.pricing.rate_card import default_rate_card, is_zero_rate_card, parse_rate_card
from forman.pricing.rounding import round2
from forman.pricing.squares import normalize_squares, sqft_to_squares

__all__ = [
    "calculate_roofing_quote",
    "default_rate_card",
    "is_zero_rate_card",
    "normalize_squares",
    "parse_rate_card",
    "require_finite_totals",
    "round2",
    "sqft_to_squares",
]
