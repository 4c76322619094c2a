"""Pytest fixtures for testing"""

import logging
import pytest
from datetime import date
from typing import Callable, Generator
from payment_scheduler.domain.models import CURRENCY_USD, ScheduleRequest, TermType


@pytest.fixture
def start_date() -> date:
    """Monday, 2022-01-10"""
    return date(2022, 1, 10)


@pytest.fixture
def make_request(start_date: date) -> Callable[..., ScheduleRequest]:
    """Build a valid request, overriding any field by keyword"""

    def _make(**overrides) -> ScheduleRequest:
        fields = {
            "term_type": TermType.INSTALLMENTS,
            "amount_cents": 3000,
            "fee_percent": 5,
            "duration_days": 60,
            "start_date": start_date,
            "currency": CURRENCY_USD,
        }
        fields.update(overrides)
        return ScheduleRequest(**fields)

    return _make


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Undo handler changes made by setup_logging"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
