"""Shared fixtures."""

from __future__ import annotations

import pytest

from forman.schemas.roofing import RateCard
from tests.factories import make_rate_card


@pytest.fixture
def rate_card() -> RateCard:
    """The default roofing rates."""
    return make_rate_card()
