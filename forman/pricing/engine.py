"""Roofing quote pricing engine.

Pure and deterministic: the same inputs, rate card and saved items always
produce the same PricingResult. Used for quote creation, quote editing and
PDF rendering, so totals match what was persisted.

Pipeline:
  1. Normalize roof size to squares (rounded to cents)
  2. Core items — labor, shingles, underlayment (always present)
  3. Tear-off & disposal (inputs.tearoff AND selections.tearoff_selected)
  4. Selected optional add-ons
  5. Selected saved custom items (quantity 1)
  6. One-time custom items
  7. Subtotal → markup → total before minimum
  8. Minimum job price floor, shown as an adjustment line item
"""

from __future__ import annotations

import logging
import math

from forman.errors import PricingCalculationError
from forman.pricing.rounding import round2, to_number
from forman.pricing.squares import squares_for_inputs
from forman.schemas.roofing import (
    LineItem,
    LineItemCategory,
    PricingResult,
    PricingType,
    QuoteArgs,
    RateCard,
    SavedCustomItem,
)

logger = logging.getLogger(__name__)

MINIMUM_ADJUSTMENT_NAME = "Minimum job price adjustment"


def _line_item(
    name: str,
    category: LineItemCategory,
    quantity: float,
    unit: str,
    unit_price: float,
    is_custom: bool = False,
) -> LineItem:
    """Build a line item with its subtotal rounded to cents."""
    quantity = to_number(quantity)
    unit_price = to_number(unit_price)
    return LineItem(
        name=name,
        category=category,
        quantity=quantity,
        unit=unit,
        unit_price=unit_price,
        subtotal=round2(quantity * unit_price),
        is_custom=is_custom,
    )


def calculate_roofing_quote(
    args: QuoteArgs,
    rate_card: RateCard,
    saved_custom_items: list[SavedCustomItem] | None = None,
) -> PricingResult:
    """Price a roofing quote.

    Args:
        args: Validated quote inputs and selections.
        rate_card: The contractor's current rates. An all-zero card is valid.
        saved_custom_items: The contractor's saved items; only those whose id
            is in ``selections.selected_saved_custom_item_ids`` are billed.

    Returns:
        PricingResult with ordered line items and rounded totals.
    """
    inputs = args.inputs
    selections = args.selections

    squares = round2(squares_for_inputs(inputs))
    line_items: list[LineItem] = []

    # Core items, always included
    line_items.append(
        _line_item("Labor", LineItemCategory.CORE, squares, "sq", rate_card.labor_per_square)
    )
    line_items.append(
        _line_item("Shingles", LineItemCategory.CORE, squares, "sq", rate_card.shingles_per_square)
    )
    line_items.append(
        _line_item("Underlayment", LineItemCategory.CORE, squares, "sq", rate_card.underlayment_per_square)
    )

    # Tear-off is billed only when both the roof needs it and the contractor ticks the box
    if inputs.tearoff and selections.tearoff_selected:
        line_items.append(
            _line_item(
                "Tear-off & disposal",
                LineItemCategory.TEAROFF,
                squares,
                "sq",
                rate_card.tearoff_disposal_per_square,
            )
        )

    # Optional add-ons
    if selections.ridge_vent_selected:
        line_items.append(
            _line_item(
                "Ridge vent",
                LineItemCategory.OPTIONAL,
                to_number(selections.ridge_vent_lf),
                "LF",
                rate_card.ridge_vent_per_lf,
            )
        )

    if selections.drip_edge_selected:
        line_items.append(
            _line_item(
                "Drip edge",
                LineItemCategory.OPTIONAL,
                to_number(selections.drip_edge_lf),
                "LF",
                rate_card.drip_edge_per_lf,
            )
        )

    if selections.ice_water_selected:
        line_items.append(
            _line_item(
                "Ice & water shield",
                LineItemCategory.OPTIONAL,
                to_number(selections.ice_water_squares),
                "sq",
                rate_card.ice_water_per_square,
            )
        )

    if selections.steep_charge_selected:
        line_items.append(
            _line_item("Steep charge (flat)", LineItemCategory.OPTIONAL, 1, "each", rate_card.steep_charge_flat)
        )

    if selections.permit_fee_selected:
        line_items.append(
            _line_item("Permit fee (flat)", LineItemCategory.OPTIONAL, 1, "each", rate_card.permit_fee_flat)
        )

    # Saved custom items, in saved-list order.
    # Per-unit saved items bill at quantity 1: there is no quantity control for them yet.
    selected_ids = set(selections.selected_saved_custom_item_ids)
    for item in saved_custom_items or []:
        if item.id not in selected_ids:
            continue
        unit = (item.unit_label or "unit") if item.pricing_type == PricingType.PER_UNIT else "each"
        line_items.append(
            _line_item(item.name, LineItemCategory.CUSTOM, 1, unit, item.unit_price, is_custom=True)
        )

    # One-time custom items
    for one_time in selections.one_time_custom_items:
        if one_time.pricing_type == PricingType.PER_UNIT:
            quantity = to_number(one_time.quantity)
            unit = one_time.unit_label or "unit"
        else:
            quantity = 1.0
            unit = "each"
        line_items.append(
            _line_item(one_time.name, LineItemCategory.CUSTOM, quantity, unit, one_time.unit_price, is_custom=True)
        )

    subtotal = round2(sum(item.subtotal for item in line_items))
    markup_percent = to_number(rate_card.markup_percent)
    markup_amount = round2(subtotal * (markup_percent / 100))
    total_before_minimum = round2(subtotal + markup_amount)

    minimum = to_number(rate_card.minimum_job_price)
    total = total_before_minimum

    if minimum > total_before_minimum:
        diff = round2(minimum - total_before_minimum)
        line_items.append(
            LineItem(
                name=MINIMUM_ADJUSTMENT_NAME,
                category=LineItemCategory.ADJUSTMENT,
                quantity=1,
                unit="each",
                unit_price=diff,
                subtotal=diff,
                is_custom=False,
            )
        )
        total = minimum

    logger.debug(
        "Priced roofing quote: squares=%s items=%d subtotal=%s total=%s",
        squares, len(line_items), subtotal, total,
    )

    return PricingResult(
        line_items=line_items,
        subtotal=subtotal,
        markup_percent=markup_percent,
        markup_amount=markup_amount,
        total_before_minimum=total_before_minimum,
        total=round2(total),
        squares=squares,
    )


def require_finite_totals(result: PricingResult) -> PricingResult:
    """Return ``result`` unchanged, or raise if any total overflowed.

    Raises:
        PricingCalculationError: A total is infinite or NaN (for example a
            huge rate multiplied by a huge quantity).
    """
    totals = (result.subtotal, result.markup_amount, result.total_before_minimum, result.total)
    if not all(math.isfinite(v) for v in totals):
        raise PricingCalculationError(f"Quote totals are not finite: total={result.total}")
    return result
