"""Pricing guidance from the contractor's past quotes.

Each past quote yields a price-per-square point (total / squares). The
median point scaled to the current roof gives a recommended total with a
±10% range.
"""

from __future__ import annotations

import statistics
from collections.abc import Iterable, Mapping
from typing import Any

from forman.config import settings
from forman.pricing.rounding import to_number
from forman.pricing.squares import normalize_squares
from forman.schemas.quotes import HistoricalPricingGuidance
from forman.schemas.roofing import RoofSizeUnit


def _sample_squares(inputs: Any) -> float | None:
    if not isinstance(inputs, Mapping):
        return None
    value = to_number(inputs.get("roof_size_value"), 0.0)
    if value <= 0:
        return None
    # Anything other than "sqft" was entered in squares
    unit = RoofSizeUnit.SQFT if inputs.get("roof_size_unit") == "sqft" else RoofSizeUnit.SQUARES
    return normalize_squares(value, unit)


def _price_per_square(sample: Mapping[str, Any]) -> float | None:
    total = to_number(sample.get("total"), 0.0)
    squares = _sample_squares(sample.get("inputs_json"))
    if total <= 0 or not squares:
        return None
    return total / squares


def build_historical_pricing_guidance(
    samples: Iterable[Mapping[str, Any]],
    current_roof_size_value: float,
    current_roof_size_unit: RoofSizeUnit | str,
) -> HistoricalPricingGuidance:
    """Recommend a total for the current roof from past quotes.

    Args:
        samples: Past quotes as ``{"total": ..., "inputs_json": {...}}``.
        current_roof_size_value: Roof size of the quote being built.
        current_roof_size_unit: "squares" or "sqft".

    Returns:
        Guidance; figures are None when no usable samples exist.
    """
    points = [p for p in (_price_per_square(s) for s in samples) if p is not None]

    current_unit = RoofSizeUnit.SQFT if current_roof_size_unit == RoofSizeUnit.SQFT else RoofSizeUnit.SQUARES
    current_squares = normalize_squares(current_roof_size_value, current_unit)
    if not points or current_squares <= 0:
        return HistoricalPricingGuidance(sample_count=len(points))

    median = statistics.median(points)
    recommended = median * current_squares
    return HistoricalPricingGuidance(
        sample_count=len(points),
        median_price_per_square=median,
        recommended_total=recommended,
        lower_range_total=recommended * settings.pricing.historical_range_low,
        upper_range_total=recommended * settings.pricing.historical_range_high,
    )
