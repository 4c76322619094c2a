"""Prometheus metrics for monitoring schedule volume, rejections, and amounts"""

from prometheus_client import Counter, Histogram

# Schedule metrics
schedule_counter = Counter(
    "payment_schedule_total",
    "Total payment schedules computed",
    ["term_type"],  # net | installments
)

rejection_counter = Counter(
    "payment_schedule_rejections_total",
    "Schedule requests rejected by validation",
    ["reason"],
)

schedule_amount_histogram = Histogram(
    "payment_schedule_amount_cents",
    "Total scheduled amount including fees",
    buckets=[1_000, 10_000, 40_000, 100_000, 500_000, 1_000_000],
)


def record_schedule(term_type: str, total_cents: int) -> None:
    """Record a successfully computed schedule"""
    schedule_counter.labels(term_type=term_type).inc()
    schedule_amount_histogram.observe(total_cents)


def record_rejection(reason: str) -> None:
    """Record a rejected schedule request by validation reason"""
    rejection_counter.labels(reason=reason).inc()
