"""Deposit amount computation for approved quotes."""

from __future__ import annotations

from forman.config import settings
from forman.pricing.rounding import round_half_up, to_number


def deposit_cents_from_percent(total_dollars: float, percent: float) -> int:
    """Deposit in cents for ``percent`` of a quote total.

    The percentage is clamped to 0–100.
    """
    total_cents = round_half_up(to_number(total_dollars) * 100)
    pct = min(100.0, max(0.0, to_number(percent)))
    return int(round_half_up(total_cents * pct / 100))


def is_deposit_payable(deposit_cents: int) -> bool:
    """True when the deposit meets the processor's minimum charge."""
    return deposit_cents >= settings.pricing.min_deposit_cents
