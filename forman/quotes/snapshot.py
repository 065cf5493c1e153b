"""Serialize a PricingResult into the snapshot persisted with a quote.

The snapshot is written once at save time and trusted afterwards for
margin guardrails and deposit math. It is never recomputed when the rate
card changes.
"""

from __future__ import annotations

from typing import Any

from forman.schemas.roofing import PricingResult

# v1 quotes carry no tax
DEFAULT_TAX = 0.0


def build_pricing_snapshot(result: PricingResult) -> dict[str, float]:
    """Aggregate totals stored in ``quotes.pricing_json``."""
    return {
        "subtotal": result.subtotal,
        "tax": DEFAULT_TAX,
        "total": result.total,
        "squares": result.squares,
        "markup_percent": result.markup_percent,
        "markup_amount": result.markup_amount,
        "total_before_minimum": result.total_before_minimum,
    }


def line_items_json(result: PricingResult) -> list[dict[str, Any]]:
    """Line items stored in ``quotes.line_items_json``, in display order."""
    return [item.model_dump(mode="json") for item in result.line_items]
