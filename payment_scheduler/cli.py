"""payment-schedule command - print a payment schedule as JSON"""

import argparse
import sys
from datetime import date, datetime
from typing import List, Optional

from payment_scheduler.config import settings
from payment_scheduler.domain.exceptions import ScheduleValidationError
from payment_scheduler.domain.models import ScheduleRequest, TermType
from payment_scheduler.infrastructure.observability.logging import setup_logging
from payment_scheduler.scheduler import compute_schedule
from payment_scheduler.schemas import dump_schedule

EXIT_INVALID_REQUEST = 2


def parse_start_date(value: str) -> date:
    """Accept YYYY-MM-DD or a full ISO 8601 datetime"""
    try:
        if "T" in value:
            return datetime.fromisoformat(value)
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid start date: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payment-schedule",
        description="Compute the dated charges for net or installment payment terms.",
    )
    parser.add_argument(
        "--terms",
        default="",
        help=f"term type ({', '.join(t.value for t in TermType)})",
    )
    parser.add_argument("--amount", type=int, required=True, help="total amount in cents")
    parser.add_argument("--fee", type=int, default=0, help="variable fee in percent (0-100)")
    parser.add_argument("--duration", type=int, required=True, help="days until the final charge")
    parser.add_argument(
        "--start",
        type=parse_start_date,
        default=None,
        help="first charge date, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--currency",
        default=None,
        help=f"currency code (default: {settings.default_currency})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(settings.log_level)

    request = ScheduleRequest(
        term_type=args.terms,
        amount_cents=args.amount,
        fee_percent=args.fee,
        duration_days=args.duration,
        start_date=args.start if args.start is not None else date.today(),
        currency=args.currency if args.currency is not None else settings.default_currency,
    )

    try:
        payments = compute_schedule(request)
    except ScheduleValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_REQUEST

    print(dump_schedule(payments))
    return 0


if __name__ == "__main__":
    sys.exit(main())
