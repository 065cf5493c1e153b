"""CustomItemRecord model — items on a contractor's "My Items" list."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Boolean, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from forman.models.base import Base, ContractorOwnedMixin, TimestampMixin


class CustomItemRecord(ContractorOwnedMixin, TimestampMixin, Base):
    """A reusable custom line item. Deactivated rather than deleted."""

    __tablename__ = "custom_items"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    pricing_type: Mapped[str] = mapped_column(String(20), nullable=False, comment="flat or per_unit")
    unit_label: Mapped[str | None] = mapped_column(String(50))
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    taxable: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<CustomItemRecord name={self.name} active={self.is_active}>"
