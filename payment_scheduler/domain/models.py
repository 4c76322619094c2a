"""Domain models - immutable dataclasses for schedule requests and charges"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

# Fixed number of charges for installment terms
NUM_INSTALLMENTS = 3

CURRENCY_USD = "USD"


class TermType(str, Enum):
    """How the total amount is charged"""

    NET = "net"  # single charge at the end of the duration
    INSTALLMENTS = "installments"  # fixed number of evenly spaced charges


@dataclass(frozen=True)
class ScheduleRequest:
    """Commercial terms a payment schedule is computed from"""

    term_type: TermType | str | None
    amount_cents: int  # lowest denomination of the currency
    fee_percent: int  # variable fee charged on every scheduled payment
    duration_days: int  # start date to final charge date
    start_date: date  # date or datetime; output dates keep the same type
    currency: str


@dataclass(frozen=True)
class ScheduledPayment:
    """Single charge in a payment schedule"""

    date: date
    amount_cents: int
    currency: str
