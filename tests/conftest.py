"""Shared pytest fixtures and configuration for all tests."""

import pytest

from pub_drinks.domain.clock import FixedTimeSource
from pub_drinks.transaction import Transaction


@pytest.fixture
def sunday() -> FixedTimeSource:
    """Sunday 17/02/2019 @ 00:00."""
    return FixedTimeSource(2019, 2, 17, 0)


@pytest.fixture
def friday_afternoon() -> FixedTimeSource:
    """Friday 22/02/2019 @ 13:00."""
    return FixedTimeSource(2019, 2, 22, 13)


@pytest.fixture
def friday_evening() -> FixedTimeSource:
    """Friday 22/02/2019 @ 19:00, inside the TGIF window."""
    return FixedTimeSource(2019, 2, 22, 19)


@pytest.fixture
def plain_transaction(sunday: FixedTimeSource) -> Transaction:
    """Transaction on a day no offer applies."""
    return Transaction(time_source=sunday)


@pytest.fixture
def friday_transaction(friday_evening: FixedTimeSource) -> Transaction:
    return Transaction(time_source=friday_evening)
