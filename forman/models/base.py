"""SQLAlchemy declarative base and the mixins shared by Forman tables.

Every table is keyed by a UUID with server-side timestamps, and every row
belongs to one contractor (``user_id``) and one trade.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from forman.models.enums import Trade


class Base(DeclarativeBase):
    """Declarative base for all Forman ORM models."""

    pass


class TimestampMixin:
    """UUID primary key plus created_at / updated_at set by PostgreSQL."""

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=func.gen_random_uuid(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    # The newest rate card per (user, trade) is found by this column
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class ContractorOwnedMixin:
    """Scopes a row to the contractor who owns it and the trade it prices."""

    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False, index=True)
    trade: Mapped[str] = mapped_column(String(30), nullable=False, default=Trade.ROOFING.value)
