"""Cent rounding and numeric coercion shared by pricing and margin math.

Amounts are floats, not Decimal: persisted quotes were priced with binary
floating point, and re-pricing must reproduce them to the cent.
"""

from __future__ import annotations

import math
import sys
from typing import Any

# Nudge applied before rounding so values like 1.005 (stored as 1.00499...)
# round up to 1.01.
_EPSILON = sys.float_info.epsilon


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward positive infinity.

    Matches the rounding stored quotes were priced with: non-finite values
    pass through, and the tie test uses the fractional part so that
    0.49999999999999994 rounds down.
    """
    if not math.isfinite(value):
        return value
    whole = math.floor(value)
    return float(whole + 1 if value - whole >= 0.5 else whole)


def round2(value: float) -> float:
    """Round to 2 decimal places."""
    return round_half_up((value + _EPSILON) * 100) / 100


def to_number(value: Any, fallback: float = 0.0) -> float:
    """Return ``value`` as a finite float, or ``fallback``.

    Only real numbers are accepted; bools, strings and None fall back.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    number = float(value)
    return number if math.isfinite(number) else fallback
