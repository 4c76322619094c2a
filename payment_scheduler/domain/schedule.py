"""Payment schedule calculation - core business logic for NET and installment terms"""

from datetime import date
from typing import List, Tuple
from payment_scheduler.domain.models import (
    NUM_INSTALLMENTS,
    ScheduledPayment,
    ScheduleRequest,
    TermType,
)
from payment_scheduler.domain.validation import parse_term_type, validate_request
from payment_scheduler.utils.date_utils import add_days, defer_to_weekday


def split_amount(total_cents: int, num_installments: int = NUM_INSTALLMENTS) -> Tuple[int, int]:
    """
    Divide a total into equal installment pieces.

    Returns: (installment_cents, remainder_cents)

    Example:
        3001 cents / 3 = 1000 per installment, remainder 1
    """
    return total_cents // num_installments, total_cents % num_installments


def apply_variable_fee(amount_cents: int, fee_percent: int) -> int:
    """
    Inflate an amount by a percentage fee, rounding up to the next whole cent.

    Integer ceiling division keeps the result exact:
        ceil(amount * (100 + fee) / 100) == -(-amount * (100 + fee) // 100)
    """
    return -(-amount_cents * (100 + fee_percent) // 100)


def compute_charge_dates(term_type: TermType, start_date: date, duration_days: int) -> List[date]:
    """
    Compute one weekend-deferred charge date per scheduled payment.

    Installments: the first NUM_INSTALLMENTS - 1 dates are spaced by
    duration // (NUM_INSTALLMENTS - 1) days from start_date. The final date is
    always start_date + duration_days, independent of the truncated increment.

    Net: a single date at start_date + duration_days.
    """
    raw_dates = []

    if term_type == TermType.INSTALLMENTS:
        increment = duration_days // (NUM_INSTALLMENTS - 1)
        raw_dates.extend(add_days(start_date, i * increment) for i in range(NUM_INSTALLMENTS - 1))

    raw_dates.append(add_days(start_date, duration_days))

    return [defer_to_weekday(d) for d in raw_dates]


def generate_payment_schedule(request: ScheduleRequest) -> List[ScheduledPayment]:
    """
    Main entry point: validate terms and build the ordered payment schedule.

    Flow:
    1. Validate request (raises ScheduleValidationError, no partial output)
    2. Split amount into installments (net terms keep the full amount)
    3. Apply fee to installment amount and remainder separately
    4. Emit evenly spaced installment charges
    5. Emit final charge carrying the fee-adjusted remainder
    """
    validate_request(request)
    term_type = parse_term_type(request.term_type)

    # Net terms charge everything at once, nothing left over
    installment_cents, remainder_cents = request.amount_cents, 0
    if term_type == TermType.INSTALLMENTS:
        installment_cents, remainder_cents = split_amount(request.amount_cents)

    # Round each part up before folding the remainder back in
    installment_cents = apply_variable_fee(installment_cents, request.fee_percent)
    remainder_cents = apply_variable_fee(remainder_cents, request.fee_percent)

    charge_dates = compute_charge_dates(term_type, request.start_date, request.duration_days)

    payments = [
        ScheduledPayment(date=charge_date, amount_cents=installment_cents, currency=request.currency)
        for charge_date in charge_dates[:-1]
    ]

    # Final charge absorbs the remainder
    payments.append(
        ScheduledPayment(
            date=charge_dates[-1],
            amount_cents=installment_cents + remainder_cents,
            currency=request.currency,
        )
    )

    return payments
