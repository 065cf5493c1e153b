"""Quote expiry status and labels."""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta

from forman.config import settings
from forman.schemas.quotes import QuoteExpirationStatus

_SECONDS_PER_HOUR = 60 * 60


def _parse_datetime(value: object) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(value)
        except (TypeError, ValueError):
            return None
    # Naive timestamps are stored as UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def default_expires_at(created_at: datetime | None = None) -> datetime:
    """Expiry for a newly created quote."""
    start = created_at or datetime.now(UTC)
    return start + timedelta(days=settings.pricing.quote_expiration_days)


def get_quote_expiration_status(
    expires_at: datetime | str | None,
    now: datetime | None = None,
) -> QuoteExpirationStatus:
    """Classify a quote as expired, expiring soon, or neither.

    A missing or unparseable expiry never expires.
    """
    expiry = _parse_datetime(expires_at)
    if expiry is None:
        return QuoteExpirationStatus()

    now = _parse_datetime(now) or datetime.now(UTC)
    remaining = (expiry - now).total_seconds()
    is_expired = remaining <= 0
    soon_window = settings.pricing.quote_expiring_soon_hours * _SECONDS_PER_HOUR
    is_expiring_soon = not is_expired and remaining <= soon_window

    return QuoteExpirationStatus(
        expires_at=expiry,
        is_expired=is_expired,
        is_expiring_soon=is_expiring_soon,
        seconds_remaining=remaining,
    )


def format_expires_in(seconds_remaining: float | None) -> str | None:
    """Human label such as "Expires in 3 days" or "Expires in 5 hours"."""
    if seconds_remaining is None:
        return None
    if seconds_remaining <= 0:
        return "Expired"

    hours = math.ceil(seconds_remaining / _SECONDS_PER_HOUR)
    if hours >= 48:
        days = math.ceil(hours / 24)
        return f"Expires in {days} day{'' if days == 1 else 's'}"

    return f"Expires in {hours} hour{'' if hours == 1 else 's'}"
