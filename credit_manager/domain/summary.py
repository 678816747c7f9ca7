"""Per-customer aggregation of credit totals"""

from typing import Iterable, Tuple
from credit_manager.domain.models import CustomerTotals


def summarize_credits(credits: Iterable[Tuple[int, int]]) -> CustomerTotals:
    """Aggregate (total_cents, paid_cents) pairs for one customer's credits"""
    total_borrowed = 0
    total_paid = 0
    has_active = False

    for total_cents, paid_cents in credits:
        total_borrowed += total_cents
        total_paid += paid_cents
        if total_cents - paid_cents > 0:
            has_active = True

    return CustomerTotals(
        total_borrowed_cents=total_borrowed,
        total_paid_cents=total_paid,
        total_outstanding_cents=total_borrowed - total_paid,
        has_active_credits=has_active,
    )
