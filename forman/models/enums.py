"""Domain enums used across SQLAlchemy models.

All enums use str mixin for JSON serialization.
"""

from __future__ import annotations

from enum import Enum


class Trade(str, Enum):
    """Trades a contractor can quote. v1 ships roofing only."""

    ROOFING = "roofing"


class QuoteStatus(str, Enum):
    """Quote lifecycle."""

    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    DECLINED = "declined"
