"""QuoteRecord model — a saved quote with its pricing snapshot.

Totals are copied from the pricing snapshot at save time and never
recomputed when the rate card changes.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import DateTime, Numeric, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from forman.models.base import Base, ContractorOwnedMixin, TimestampMixin
from forman.models.enums import QuoteStatus


class QuoteRecord(ContractorOwnedMixin, TimestampMixin, Base):
    """A contractor's quote for one customer."""

    __tablename__ = "quotes"

    # Customer
    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    customer_address: Mapped[str | None] = mapped_column(Text)

    # What was entered and what it cost at save time
    inputs_json: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
    selections_json: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)
    line_items_json: Mapped[list[dict[str, Any]]] = mapped_column(JSONB, nullable=False, default=list)
    pricing_json: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)

    subtotal: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    tax: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Lifecycle
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=QuoteStatus.DRAFT.value, index=True)
    share_token: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    expires_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    low_margin_acknowledged_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"<QuoteRecord id={self.id} status={self.status} total={self.total}>"
