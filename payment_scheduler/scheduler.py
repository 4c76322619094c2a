"""PaymentScheduler - schedule computation with logging and metrics"""

from typing import List

from payment_scheduler.domain.exceptions import ScheduleValidationError
from payment_scheduler.domain.models import ScheduledPayment, ScheduleRequest
from payment_scheduler.domain.schedule import generate_payment_schedule
from payment_scheduler.domain.validation import parse_term_type
from payment_scheduler.infrastructure.observability.logging import log_rejection, log_schedule
from payment_scheduler.infrastructure.observability.metrics import record_rejection, record_schedule


class PaymentScheduler:
    """Stateless calculator, safe to share between callers"""

    def compute_schedule(self, request: ScheduleRequest) -> List[ScheduledPayment]:
        """
        Compute the ordered payment schedule for a request.

        Returns:
            One payment for net terms, NUM_INSTALLMENTS payments for installments

        Raises:
            ScheduleValidationError: request failed validation, nothing was scheduled
        """
        try:
            payments = generate_payment_schedule(request)
        except ScheduleValidationError as e:
            record_rejection(e.reason)
            log_rejection(e.reason, str(e))
            raise

        term_type = parse_term_type(request.term_type).value
        total_cents = sum(p.amount_cents for p in payments)
        record_schedule(term_type, total_cents)
        log_schedule(term_type, len(payments), total_cents, request.currency)

        return payments


default_scheduler = PaymentScheduler()


def compute_schedule(request: ScheduleRequest) -> List[ScheduledPayment]:
    """Compute a schedule with the shared scheduler instance"""
    return default_scheduler.compute_schedule(request)
