"""Pydantic schemas for roofing quotes, rate cards and pricing results.

Pure data classes — no DB dependencies. Inputs are validated here so the
pricing engine can assume well-formed data.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class RoofSizeUnit(str, Enum):
    """Unit the contractor entered the roof size in."""

    SQUARES = "squares"
    SQFT = "sqft"


class PricingType(str, Enum):
    """How a custom item is billed."""

    FLAT = "flat"
    PER_UNIT = "per_unit"


class LineItemCategory(str, Enum):
    """Line-item grouping shown on the quote."""

    CORE = "core"
    TEAROFF = "tearoff"
    OPTIONAL = "optional"
    CUSTOM = "custom"
    ADJUSTMENT = "adjustment"


# ---------------------------------------------------------------------------
# Rate card (stored in rate_cards.rates_json)
# ---------------------------------------------------------------------------


class RateCard(BaseModel):
    """A contractor's roofing rates."""

    model_config = ConfigDict(allow_inf_nan=False)

    labor_per_square: float = Field(ge=0)
    shingles_per_square: float = Field(ge=0)
    underlayment_per_square: float = Field(ge=0)
    tearoff_disposal_per_square: float = Field(ge=0)

    minimum_job_price: float = Field(ge=0)
    markup_percent: float = Field(ge=0, le=500)

    ridge_vent_per_lf: float = Field(ge=0)
    drip_edge_per_lf: float = Field(ge=0)
    ice_water_per_square: float = Field(ge=0)
    steep_charge_flat: float = Field(ge=0)
    permit_fee_flat: float = Field(ge=0)


# ---------------------------------------------------------------------------
# Custom items ("My Items")
# ---------------------------------------------------------------------------


class SavedCustomItem(BaseModel):
    """A reusable item from the contractor's saved list."""

    id: str
    name: str
    pricing_type: PricingType
    unit_label: str | None = None
    unit_price: float = Field(ge=0)
    taxable: bool = False


class CreateCustomItem(BaseModel):
    """Payload for adding an item to the contractor's saved list."""

    model_config = ConfigDict(str_strip_whitespace=True, allow_inf_nan=False)

    name: str = Field(min_length=1)
    pricing_type: PricingType
    unit_label: str | None = None
    unit_price: float = Field(ge=0)
    taxable: bool = False

    @model_validator(mode="after")
    def _unit_label_for_per_unit(self) -> CreateCustomItem:
        if self.pricing_type == PricingType.PER_UNIT and not (self.unit_label or "").strip():
            msg = "Unit label is required for per-unit items"
            raise ValueError(msg)
        return self


class OneTimeCustomItem(BaseModel):
    """An ad-hoc item added to a single quote."""

    model_config = ConfigDict(str_strip_whitespace=True, allow_inf_nan=False)

    name: str = Field(min_length=1)
    pricing_type: PricingType
    quantity: float | None = None
    unit_label: str | None = None
    unit_price: float = Field(ge=0)
    taxable: bool = False
    save_to_account: bool = False

    @model_validator(mode="after")
    def _per_unit_requirements(self) -> OneTimeCustomItem:
        if self.pricing_type == PricingType.PER_UNIT:
            if not (self.unit_label or "").strip():
                msg = "Unit label is required for per-unit items"
                raise ValueError(msg)
            if not self.quantity or self.quantity <= 0:
                msg = "Quantity is required for per-unit items"
                raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Quote inputs and selections
# ---------------------------------------------------------------------------


class QuoteInputs(BaseModel):
    """Customer and roof characteristics for a new quote."""

    model_config = ConfigDict(allow_inf_nan=False)

    customer_name: str = Field(min_length=1)
    customer_address: str | None = None

    roof_size_value: float = Field(ge=0.01)
    roof_size_unit: RoofSizeUnit

    pitch: str = Field(min_length=1)  # e.g. "7/12"
    stories: Literal[1, 2, 3]

    tearoff: bool
    layers: Literal[1, 2, 3] | None = None

    @model_validator(mode="after")
    def _layers_match_tearoff(self) -> QuoteInputs:
        if self.tearoff and not self.layers:
            msg = "Layers is required when tear-off is selected"
            raise ValueError(msg)
        if not self.tearoff and self.layers:
            msg = "Layers should be empty when tear-off is not selected"
            raise ValueError(msg)
        return self


class QuoteSelections(BaseModel):
    """Which optional line items apply to the quote.

    ``tearoff_selected`` is the billing checkbox. It is independent of
    ``QuoteInputs.tearoff``: tear-off is billed only when both are true.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    ridge_vent_selected: bool = False
    ridge_vent_lf: float | None = None

    drip_edge_selected: bool = False
    drip_edge_lf: float | None = None

    ice_water_selected: bool = False
    ice_water_squares: float | None = None

    steep_charge_selected: bool = False
    permit_fee_selected: bool = False

    selected_saved_custom_item_ids: list[str] = Field(default_factory=list)
    one_time_custom_items: list[OneTimeCustomItem] = Field(default_factory=list)

    tearoff_selected: bool = False

    @model_validator(mode="after")
    def _quantities_for_selected(self) -> QuoteSelections:
        checks = (
            (self.ridge_vent_selected, self.ridge_vent_lf, "ridge_vent_lf: LF required"),
            (self.drip_edge_selected, self.drip_edge_lf, "drip_edge_lf: LF required"),
            (self.ice_water_selected, self.ice_water_squares, "ice_water_squares: Squares required"),
        )
        for selected, qty, msg in checks:
            if selected and (not qty or qty <= 0):
                raise ValueError(msg)
        return self


class QuoteArgs(BaseModel):
    """Canonical arguments for pricing, saving and rendering a quote."""

    inputs: QuoteInputs
    selections: QuoteSelections


# ---------------------------------------------------------------------------
# Pricing output
# ---------------------------------------------------------------------------


class LineItem(BaseModel):
    """One priced component of a quote."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: LineItemCategory
    quantity: float
    unit: str  # "sq", "LF", "each", ...
    unit_price: float
    subtotal: float
    is_custom: bool = False


class PricingResult(BaseModel):
    """Itemized price breakdown and totals for a quote."""

    line_items: list[LineItem]
    subtotal: float
    markup_percent: float
    markup_amount: float
    total_before_minimum: float
    total: float
    squares: float
