"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ScheduleValidationError(DomainException):
    """Schedule request was rejected before any calculation ran"""

    reason = "invalid_request"


class MissingTermTypeError(ScheduleValidationError):
    """Term type is empty or not a recognized value"""

    reason = "missing_term_type"


class NonPositiveAmountError(ScheduleValidationError):
    """Amount to charge is zero or negative"""

    reason = "non_positive_amount"


class InstallmentAmountTooSmallError(ScheduleValidationError):
    """Amount cannot be split into positive installments"""

    reason = "installment_amount_too_small"


class FeeOutOfRangeError(ScheduleValidationError):
    """Fee percentage outside 0-100"""

    reason = "fee_out_of_range"


class NonPositiveDurationError(ScheduleValidationError):
    """Duration in days is zero or negative"""

    reason = "non_positive_duration"


class MissingCurrencyError(ScheduleValidationError):
    """Currency is empty"""

    reason = "missing_currency"
