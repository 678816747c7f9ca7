"""Prometheus metrics for credit issuance, collections and HTTP latency"""

from prometheus_client import Counter, Histogram

# Credit metrics
credits_issued_counter = Counter(
    "credit_manager_credits_issued_total",
    "Credits issued",
    ["type", "repayment_type"],
)

# Payment metrics
payments_recorded_counter = Counter(
    "credit_manager_payments_total",
    "Payments recorded",
)

payment_amount_histogram = Histogram(
    "credit_manager_payment_amount",
    "Recorded payment amounts in currency units",
    buckets=[100, 500, 1_000, 5_000, 10_000, 50_000, 100_000, 500_000],
)

overpayment_counter = Counter(
    "credit_manager_overpayments_total",
    "Payments that pushed a credit's balance below zero",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_credit_issued(credit_type: str, repayment_type: str) -> None:
    credits_issued_counter.labels(type=credit_type, repayment_type=repayment_type).inc()


def record_payment(amount_cents: int, outstanding_cents: int) -> None:
    """Record payment metrics, counting overpayments separately"""
    payments_recorded_counter.inc()
    payment_amount_histogram.observe(amount_cents / 100)
    if outstanding_cents < 0:
        overpayment_counter.inc()
