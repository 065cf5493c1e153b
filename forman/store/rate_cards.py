"""Rate-card loading and saving.

Loading never falls back to defaults: a contractor without rates cannot
create quotes until they set them.
"""

from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forman.errors import RateCardNotConfiguredError
from forman.models.enums import Trade
from forman.models.rate_card import RateCardRecord
from forman.pricing.rate_card import parse_rate_card
from forman.schemas.roofing import RateCard

logger = logging.getLogger(__name__)


async def _latest_rate_card_row(db: AsyncSession, user_id: uuid.UUID, trade: str) -> RateCardRecord | None:
    result = await db.execute(
        select(RateCardRecord)
        .where(RateCardRecord.user_id == user_id, RateCardRecord.trade == trade)
        .order_by(RateCardRecord.updated_at.desc())
        .limit(1)
    )
    return result.scalars().first()


async def load_roofing_rate_card(db: AsyncSession, user_id: uuid.UUID) -> RateCard:
    """Load the contractor's current roofing rate card.

    Raises:
        RateCardNotConfiguredError: No rate card saved for roofing.
        RateCardInvalidError: The stored rates fail validation.
    """
    trade = Trade.ROOFING.value
    row = await _latest_rate_card_row(db, user_id, trade)
    if row is None:
        logger.info("No %s rate card for user %s", trade, user_id)
        raise RateCardNotConfiguredError(str(user_id), trade)
    return parse_rate_card(row.rates_json, trade=trade)


async def save_rate_card(
    db: AsyncSession,
    user_id: uuid.UUID,
    card: RateCard,
    trade: str = Trade.ROOFING.value,
) -> RateCardRecord:
    """Insert or update the contractor's rate card for a trade."""
    row = await _latest_rate_card_row(db, user_id, trade)
    if row is None:
        row = RateCardRecord(user_id=user_id, trade=trade, rates_json=card.model_dump())
        db.add(row)
        logger.info("Created %s rate card for user %s", trade, user_id)
    else:
        row.rates_json = card.model_dump()
        logger.info("Updated %s rate card for user %s", trade, user_id)
    await db.flush()
    return row
