"""Saved custom items ("My Items") — load, create, activate/deactivate."""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forman.models.custom_item import CustomItemRecord
from forman.models.enums import Trade
from forman.schemas.roofing import CreateCustomItem, PricingType, SavedCustomItem

logger = logging.getLogger(__name__)


def _to_saved_item(row: CustomItemRecord) -> SavedCustomItem:
    return SavedCustomItem(
        id=str(row.id),
        name=row.name,
        pricing_type=PricingType(row.pricing_type),
        unit_label=row.unit_label,
        unit_price=float(row.unit_price),
        taxable=row.taxable,
    )


def normalize_unit_label(payload: CreateCustomItem) -> str:
    """Stored label: "Flat" for flat items, else the trimmed label or "Unit"."""
    if payload.pricing_type == PricingType.FLAT:
        return "Flat"
    return (payload.unit_label or "").strip() or "Unit"


async def load_saved_custom_items(
    db: AsyncSession,
    user_id: uuid.UUID,
    trade: str = Trade.ROOFING.value,
    active_only: bool = True,
) -> list[SavedCustomItem]:
    """Load a contractor's saved items for a trade, oldest first."""
    stmt = select(CustomItemRecord).where(
        CustomItemRecord.user_id == user_id,
        CustomItemRecord.trade == trade,
    )
    if active_only:
        stmt = stmt.where(CustomItemRecord.is_active.is_(True))
    result = await db.execute(stmt.order_by(CustomItemRecord.created_at))
    return [_to_saved_item(row) for row in result.scalars().all()]


async def create_custom_item(
    db: AsyncSession,
    user_id: uuid.UUID,
    payload: CreateCustomItem,
    trade: str = Trade.ROOFING.value,
) -> CustomItemRecord:
    """Add an item to the contractor's saved list."""
    row = CustomItemRecord(
        user_id=user_id,
        trade=trade,
        name=payload.name.strip(),
        pricing_type=payload.pricing_type.value,
        unit_label=normalize_unit_label(payload),
        unit_price=Decimal(str(payload.unit_price)),
        taxable=payload.taxable,
        is_active=True,
    )
    db.add(row)
    await db.flush()
    logger.info("Saved custom item %r for user %s", row.name, user_id)
    return row


async def set_custom_item_active(
    db: AsyncSession,
    user_id: uuid.UUID,
    item_id: uuid.UUID,
    is_active: bool,
) -> bool:
    """Activate or deactivate one of the contractor's items.

    Returns:
        True if an item was updated.
    """
    result = await db.execute(
        update(CustomItemRecord)
        .where(CustomItemRecord.id == item_id, CustomItemRecord.user_id == user_id)
        .values(is_active=is_active)
    )
    updated = (result.rowcount or 0) > 0
    if not updated:
        logger.warning("Custom item %s not found for user %s", item_id, user_id)
    return updated
