"""Quote creation flow: load rates, price, persist.

Rate-card errors propagate unchanged so callers can tell the contractor to
set their rates. The commit belongs to the caller's session scope.
"""

from __future__ import annotations

import logging
import secrets
import uuid
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from forman.errors import PricingCalculationError
from forman.models.enums import QuoteStatus, Trade
from forman.models.quote import QuoteRecord
from forman.pricing.engine import calculate_roofing_quote, require_finite_totals
from forman.pricing.rate_card import is_zero_rate_card
from forman.quotes.expiration import default_expires_at
from forman.quotes.snapshot import build_pricing_snapshot, line_items_json
from forman.schemas.roofing import CreateCustomItem, PricingResult, QuoteArgs
from forman.store.custom_items import create_custom_item, load_saved_custom_items
from forman.store.rate_cards import load_roofing_rate_card

logger = logging.getLogger(__name__)

SHARE_TOKEN_BYTES = 16


async def price_quote(db: AsyncSession, user_id: uuid.UUID, args: QuoteArgs) -> PricingResult:
    """Price a quote against the contractor's current rates and saved items.

    Raises:
        RateCardNotConfiguredError: No roofing rate card.
        RateCardInvalidError: Stored rate card fails validation.
        PricingCalculationError: The engine failed on malformed data or a
            total overflowed.
    """
    rate_card = await load_roofing_rate_card(db, user_id)
    if is_zero_rate_card(rate_card):
        logger.warning("Pricing quote for user %s with an all-zero rate card", user_id)

    saved_items = await load_saved_custom_items(db, user_id, trade=Trade.ROOFING.value)

    try:
        return require_finite_totals(calculate_roofing_quote(args, rate_card, saved_items))
    except PricingCalculationError:
        logger.error("Pricing for user %s produced non-finite totals", user_id)
        raise
    except (TypeError, ValueError, AttributeError, ArithmeticError) as e:
        logger.error("Pricing calculation failed for user %s: %s", user_id, e)
        raise PricingCalculationError(str(e)) from e


async def _save_one_time_items(db: AsyncSession, user_id: uuid.UUID, args: QuoteArgs) -> int:
    """Copy one-time items flagged ``save_to_account`` into the saved list."""
    saved = 0
    for item in args.selections.one_time_custom_items:
        if not item.save_to_account:
            continue
        await create_custom_item(
            db,
            user_id,
            CreateCustomItem(
                name=item.name,
                pricing_type=item.pricing_type,
                unit_label=item.unit_label,
                unit_price=item.unit_price,
                taxable=item.taxable,
            ),
            trade=Trade.ROOFING.value,
        )
        saved += 1
    return saved


async def create_quote(
    db: AsyncSession,
    user_id: uuid.UUID,
    args: QuoteArgs,
    now: datetime | None = None,
) -> QuoteRecord:
    """Price and store a new draft quote with its pricing snapshot."""
    pricing = await price_quote(db, user_id, args)
    snapshot = build_pricing_snapshot(pricing)

    saved = await _save_one_time_items(db, user_id, args)
    if saved:
        logger.info("Saved %d one-time items to account for user %s", saved, user_id)

    now = now or datetime.now(UTC)
    quote = QuoteRecord(
        user_id=user_id,
        trade=Trade.ROOFING.value,
        customer_name=args.inputs.customer_name,
        customer_address=args.inputs.customer_address,
        inputs_json=args.inputs.model_dump(mode="json"),
        selections_json=args.selections.model_dump(mode="json"),
        line_items_json=line_items_json(pricing),
        pricing_json=snapshot,
        subtotal=Decimal(str(snapshot["subtotal"])),
        tax=Decimal(str(snapshot["tax"])),
        total=Decimal(str(snapshot["total"])),
        status=QuoteStatus.DRAFT.value,
        share_token=secrets.token_urlsafe(SHARE_TOKEN_BYTES),
        expires_at=default_expires_at(now),
    )
    db.add(quote)
    await db.flush()

    logger.info("Created quote for user %s: total=%s items=%d", user_id, snapshot["total"], len(pricing.line_items))
    return quote
