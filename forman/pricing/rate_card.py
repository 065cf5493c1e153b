"""Rate-card defaults and validation helpers.

The defaults only pre-fill the settings form. Pricing never substitutes
them for a missing rate card.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from forman.errors import RateCardInvalidError
from forman.schemas.roofing import RateCard

logger = logging.getLogger(__name__)

ROOFING_RATE_DEFAULTS: dict[str, float] = {
    "labor_per_square": 55,
    "shingles_per_square": 115,
    "underlayment_per_square": 20,
    "tearoff_disposal_per_square": 35,
    "minimum_job_price": 4500,
    "markup_percent": 15,
    "ridge_vent_per_lf": 8.5,
    "drip_edge_per_lf": 2.25,
    "ice_water_per_square": 45,
    "steep_charge_flat": 450,
    "permit_fee_flat": 250,
}


def default_rate_card() -> RateCard:
    """Starting rates shown to a contractor who has not saved any yet."""
    return RateCard(**ROOFING_RATE_DEFAULTS)


def is_zero_rate_card(card: RateCard) -> bool:
    """True when every rate is 0 — a contractor still mid-setup."""
    values = list(card.model_dump().values())
    return bool(values) and all(v == 0 for v in values)


def parse_rate_card(rates_json: Any, trade: str = "roofing") -> RateCard:
    """Validate a stored rates blob.

    Raises:
        RateCardInvalidError: If the blob is not a valid rate card.
    """
    try:
        return RateCard.model_validate(rates_json)
    except ValidationError as e:
        logger.warning("Invalid %s rate card: %d validation errors", trade, e.error_count())
        msg = f"{trade} rate card is invalid: {e.error_count()} validation errors"
        raise RateCardInvalidError(msg, trade=trade) from e
