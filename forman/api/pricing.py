"""Pricing API — stateless quote previews and rate-card defaults."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from forman.pricing.engine import calculate_roofing_quote, require_finite_totals
from forman.pricing.rate_card import default_rate_card, is_zero_rate_card
from forman.quotes.margin import calculate_effective_margin, is_low_margin
from forman.schemas.quotes import PricingPreviewRequest, PricingPreviewResponse
from forman.schemas.roofing import RateCard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["pricing"])


@router.post("/pricing/roofing/preview", response_model=PricingPreviewResponse)
async def preview_roofing_quote(body: PricingPreviewRequest) -> PricingPreviewResponse:
    """Price a roofing quote and report its effective margin."""
    pricing = require_finite_totals(calculate_roofing_quote(body.args, body.rate_card, body.saved_custom_items))
    margin = calculate_effective_margin(pricing)
    return PricingPreviewResponse(
        pricing=pricing,
        margin=margin,
        low_margin=is_low_margin(margin.margin_pct),
        zero_rate_card=is_zero_rate_card(body.rate_card),
    )


@router.get("/rate-cards/roofing/defaults", response_model=RateCard)
async def roofing_rate_defaults() -> RateCard:
    """Starting rates for the settings form."""
    return default_rate_card()
