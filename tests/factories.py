"""Factories for rate cards and quote arguments used across tests."""

from __future__ import annotations

from typing import Any

from forman.pricing.rate_card import ROOFING_RATE_DEFAULTS
from forman.schemas.roofing import QuoteArgs, QuoteInputs, QuoteSelections, RateCard


def make_args(
    roof_size_value: float = 24,
    roof_size_unit: str = "squares",
    tearoff: bool = False,
    selections: dict[str, Any] | None = None,
) -> QuoteArgs:
    """Build QuoteArgs with sensible defaults for the customer fields."""
    return QuoteArgs(
        inputs=QuoteInputs(
            customer_name="Jane Doe",
            customer_address="12 Elm St",
            roof_size_value=roof_size_value,
            roof_size_unit=roof_size_unit,
            pitch="7/12",
            stories=1,
            tearoff=tearoff,
            layers=1 if tearoff else None,
        ),
        selections=QuoteSelections(**(selections or {})),
    )


def make_rate_card(**overrides: float) -> RateCard:
    return RateCard(**{**ROOFING_RATE_DEFAULTS, **overrides})


def zero_rate_card(**overrides: float) -> RateCard:
    return RateCard(**{**{k: 0 for k in ROOFING_RATE_DEFAULTS}, **overrides})
