"""Unit tests for the PaymentScheduler service"""

import logging
import pytest
from datetime import date
from prometheus_client import REGISTRY
from payment_scheduler.domain.models import TermType
from payment_scheduler.domain.exceptions import FeeOutOfRangeError, MissingCurrencyError
from payment_scheduler.scheduler import PaymentScheduler, compute_schedule


def sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_compute_schedule_installments(make_request):
    """Test service returns the domain schedule unchanged"""
    payments = PaymentScheduler().compute_schedule(make_request(amount_cents=3001))

    assert [p.amount_cents for p in payments] == [1050, 1050, 1052]
    assert [p.date for p in payments] == [date(2022, 1, 10), date(2022, 2, 9), date(2022, 3, 11)]


def test_compute_schedule_shared_instance(make_request):
    """Test module-level helper matches a fresh scheduler"""
    request = make_request(term_type=TermType.NET)
    assert compute_schedule(request) == PaymentScheduler().compute_schedule(request)


def test_compute_schedule_is_repeatable(make_request):
    """Test same request always yields the same schedule"""
    scheduler = PaymentScheduler()
    request = make_request()
    assert scheduler.compute_schedule(request) == scheduler.compute_schedule(request)


def test_compute_schedule_records_metrics(make_request):
    """Test schedule counter increments by term type"""
    before = sample("payment_schedule_total", {"term_type": "net"})

    compute_schedule(make_request(term_type=TermType.NET))

    assert sample("payment_schedule_total", {"term_type": "net"}) == before + 1


def test_compute_schedule_rejection_metrics(make_request):
    """Test rejected requests are counted by reason and re-raised"""
    before = sample("payment_schedule_rejections_total", {"reason": "fee_out_of_range"})

    with pytest.raises(FeeOutOfRangeError):
        compute_schedule(make_request(fee_percent=150))

    assert sample("payment_schedule_rejections_total", {"reason": "fee_out_of_range"}) == before + 1


def test_compute_schedule_logs_outcome(make_request, caplog: pytest.LogCaptureFixture):
    """Test structured log record for a computed schedule"""
    with caplog.at_level(logging.INFO, logger="payment_scheduler"):
        compute_schedule(make_request(amount_cents=3001))

    record = next(r for r in caplog.records if r.getMessage() == "Schedule computed")
    assert record.term_type == "installments"
    assert record.payment_count == 3
    assert record.total_cents == 3152
    assert record.currency == "USD"


def test_compute_schedule_logs_rejection(make_request, caplog: pytest.LogCaptureFixture):
    """Test rejected requests are logged with their reason"""
    with caplog.at_level(logging.WARNING, logger="payment_scheduler"):
        with pytest.raises(MissingCurrencyError):
            compute_schedule(make_request(currency=""))

    record = next(r for r in caplog.records if r.levelno == logging.WARNING)
    assert record.reason == "missing_currency"
    assert "currency must be specified" in record.getMessage()
