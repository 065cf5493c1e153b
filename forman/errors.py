"""Domain exceptions.

Each error carries a ``user_message`` safe to show to the contractor.
"""

from __future__ import annotations


class FormanError(Exception):
    """Base class for all Forman domain errors."""

    def __init__(self, message: str, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class RateCardNotConfiguredError(FormanError):
    """Raised when a contractor has no rate card for the requested trade."""

    def __init__(self, user_id: str, trade: str) -> None:
        super().__init__(
            f"No {trade} rate card found for user {user_id}",
            user_message=f"{trade.capitalize()} rates not configured. Set your rates first.",
        )
        self.user_id = user_id
        self.trade = trade


class RateCardInvalidError(FormanError):
    """Raised when a stored rate card fails validation."""

    def __init__(self, message: str, trade: str = "roofing") -> None:
        super().__init__(
            message,
            user_message=f"{trade.capitalize()} rate card is invalid. Fix your rates first.",
        )
        self.trade = trade


class PricingCalculationError(FormanError):
    """Raised when the pricing engine fails on malformed data."""

    def __init__(self, message: str) -> None:
        super().__init__(message, user_message="Pricing calculation failed. Check inputs and rates.")
