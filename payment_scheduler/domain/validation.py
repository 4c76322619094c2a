"""Schedule request validation"""

from payment_scheduler.domain.models import NUM_INSTALLMENTS, ScheduleRequest, TermType
from payment_scheduler.domain.exceptions import (
    FeeOutOfRangeError,
    InstallmentAmountTooSmallError,
    MissingCurrencyError,
    MissingTermTypeError,
    NonPositiveAmountError,
    NonPositiveDurationError,
)


def parse_term_type(value: TermType | str | None) -> TermType:
    """Resolve a term type or its string value, rejecting anything else"""
    if not value:
        raise MissingTermTypeError("must specify a term type")
    try:
        return TermType(value)
    except ValueError:
        raise MissingTermTypeError("must specify a term type") from None


def validate_request(request: ScheduleRequest) -> None:
    """
    Reject malformed schedule requests.

    Checks run in a fixed order and the first failure wins, so a request
    breaking several rules always produces the same error:
    1. term type present and recognized
    2. amount greater than 0
    3. installment amount at least NUM_INSTALLMENTS
    4. fee between 0 and 100 inclusive
    5. duration greater than 0
    6. currency non-empty

    Raises:
        ScheduleValidationError subclass carrying the user-facing message
    """
    term_type = parse_term_type(request.term_type)

    if request.amount_cents <= 0:
        raise NonPositiveAmountError("amount to charge must be greater than 0")

    if term_type == TermType.INSTALLMENTS and request.amount_cents < NUM_INSTALLMENTS:
        raise InstallmentAmountTooSmallError(
            f"minimum amount for installments is {NUM_INSTALLMENTS} {request.currency}"
        )

    if request.fee_percent < 0 or request.fee_percent > 100:
        raise FeeOutOfRangeError("fee (in percent) must be an amount between 0 and 100")

    if request.duration_days <= 0:
        raise NonPositiveDurationError("duration in days must be greater than 0")

    if not request.currency:
        raise MissingCurrencyError("currency must be specified")
