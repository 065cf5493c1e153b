"""Pydantic schemas for derived quote figures and the pricing preview API.

Margin, expiry and historical guidance are computed for display and
guardrails, never persisted.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from forman.schemas.roofing import PricingResult, QuoteArgs, RateCard, SavedCustomItem


class EffectiveMargin(BaseModel):
    """Revenue-based margin derived from a stored pricing snapshot."""

    subtotal: float = 0.0
    total: float = 0.0
    markup_percent: float = 0.0
    markup_amount: float = 0.0
    margin_pct: float = 0.0  # (total - subtotal) / total × 100


class QuoteExpirationStatus(BaseModel):
    """Where a quote stands relative to its expiry time."""

    expires_at: datetime | None = None
    is_expired: bool = False
    is_expiring_soon: bool = False
    seconds_remaining: float | None = None


class HistoricalPricingGuidance(BaseModel):
    """Suggested price range from the contractor's past quotes."""

    sample_count: int
    median_price_per_square: float | None = None
    recommended_total: float | None = None
    lower_range_total: float | None = None
    upper_range_total: float | None = None


class PricingPreviewRequest(BaseModel):
    """Price a quote against an explicit rate card, without touching the DB."""

    args: QuoteArgs
    rate_card: RateCard
    saved_custom_items: list[SavedCustomItem] = Field(default_factory=list)


class PricingPreviewResponse(BaseModel):
    """Pricing plus the guardrail figures shown next to it."""

    pricing: PricingResult
    margin: EffectiveMargin
    low_margin: bool
    zero_rate_card: bool
