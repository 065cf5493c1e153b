"""Effective margin derived from a stored pricing snapshot.

No job costs are tracked, so margin is a revenue-based proxy:

    margin_pct = (total - subtotal) / total × 100

Older quotes may be missing fields; every figure degrades to a safe
default and this module never raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from forman.config import settings
from forman.pricing.rounding import to_number
from forman.schemas.quotes import EffectiveMargin


def _as_mapping(pricing: Any) -> Mapping[str, Any]:
    if isinstance(pricing, BaseModel):
        return pricing.model_dump()
    if isinstance(pricing, Mapping):
        return pricing
    return {}


def calculate_effective_margin(pricing: Any) -> EffectiveMargin:
    """Derive subtotal, total, markup and margin from a pricing snapshot.

    Args:
        pricing: A stored ``pricing_json`` mapping, a PricingResult, or
            anything else (treated as empty).

    Returns:
        EffectiveMargin; all zeros when nothing usable is present.
    """
    p = _as_mapping(pricing)

    subtotal = to_number(p.get("subtotal"), 0.0)
    total = to_number(p.get("total"), subtotal)
    markup_percent = to_number(p.get("markup_percent"), 0.0)
    markup_amount = to_number(p.get("markup_amount"), max(0.0, total - subtotal))

    margin_pct = (total - subtotal) / total * 100 if total > 0 else 0.0

    return EffectiveMargin(
        subtotal=subtotal,
        total=total,
        markup_percent=markup_percent,
        markup_amount=markup_amount,
        margin_pct=margin_pct,
    )


def is_low_margin(margin_pct: float, threshold: float | None = None) -> bool:
    """True when margin falls below the target (default: settings)."""
    target = settings.pricing.target_margin_pct if threshold is None else threshold
    return margin_pct < target


def requires_margin_acknowledgement(pricing: Any, acknowledged_at: datetime | None) -> bool:
    """Whether a quote must be acknowledged before it can be shared or paid."""
    margin = calculate_effective_margin(pricing)
    return is_low_margin(margin.margin_pct) and acknowledged_at is None
