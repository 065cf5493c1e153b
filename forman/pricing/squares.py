"""Roof-size normalization to roofing squares (1 square = 100 sq ft)."""

from __future__ import annotations

from forman.pricing.rounding import to_number
from forman.schemas.roofing import QuoteInputs, RoofSizeUnit

SQFT_PER_SQUARE = 100


def sqft_to_squares(sqft: float) -> float:
    return sqft / SQFT_PER_SQUARE


def normalize_squares(value: float, unit: RoofSizeUnit | str) -> float:
    """Convert a roof size to squares without rounding.

    Non-finite or non-positive sizes count as 0 squares.
    """
    size = to_number(value, 0.0)
    if size <= 0:
        return 0.0
    if RoofSizeUnit(unit) == RoofSizeUnit.SQUARES:
        return size
    return sqft_to_squares(size)


def squares_for_inputs(inputs: QuoteInputs) -> float:
    """Normalized squares for a quote's roof size."""
    return normalize_squares(inputs.roof_size_value, inputs.roof_size_unit)
