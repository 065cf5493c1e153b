"""SQLAlchemy ORM models for Forman.

Import all models here so Alembic and Base.metadata.create_all() discover them.
"""

from __future__ import annotations

from forman.models.base import Base
from forman.models.custom_item import CustomItemRecord
from forman.models.enums import QuoteStatus, Trade
from forman.models.quote import QuoteRecord
from forman.models.rate_card import RateCardRecord

__all__ = [
    # Base
    "Base",
    # Models
    "RateCardRecord",
    "CustomItemRecord",
    "QuoteRecord",
    # Enums
    "Trade",
    "QuoteStatus",
]
