"""Map domain errors to JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from forman.errors import (
    FormanError,
    PricingCalculationError,
    RateCardInvalidError,
    RateCardNotConfiguredError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[FormanError], int] = {
    RateCardNotConfiguredError: 409,
    RateCardInvalidError: 409,
    PricingCalculationError: 422,
}


def status_for(exc: FormanError) -> int:
    for exc_type, status in _STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status
    return 400


async def forman_error_handler(request: Request, exc: FormanError) -> JSONResponse:
    status = status_for(exc)
    logger.info("%s on %s → %d: %s", type(exc).__name__, request.url.path, status, exc)
    return JSONResponse(status_code=status, content={"error": exc.user_message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FormanError, forman_error_handler)  # type: ignore[arg-type]
