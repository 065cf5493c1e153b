"""RateCardRecord model — a contractor's stored rates for one trade."""

from __future__ import annotations

from typing import Any

from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from forman.models.base import Base, ContractorOwnedMixin, TimestampMixin


class RateCardRecord(ContractorOwnedMixin, TimestampMixin, Base):
    """Rates blob per contractor and trade; the newest row wins."""

    __tablename__ = "rate_cards"

    # Validated into a RateCard on read
    rates_json: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False, default=dict)

    def __repr__(self) -> str:
        return f"<RateCardRecord user_id={self.user_id} trade={self.trade}>"
