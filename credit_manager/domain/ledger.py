"""Payment history reconstruction with running balance"""

from typing import Iterable, List
from credit_manager.domain.models import LedgerEntry, PaymentRecord


def build_payment_history(total_cents: int, payments: Iterable[PaymentRecord]) -> List[LedgerEntry]:
    """
    Annotate each payment with the balance remaining after it, newest first.

    Payments are applied in date order. `sorted` is stable, so payments sharing
    a date keep the order they were supplied in (storage/creation order).
    Overpayment drives the balance negative and is reported unclamped.
    """
    chronological = sorted(payments, key=lambda p: p.date)

    running_balance = total_cents
    entries = []
    for payment in chronological:
        running_balance -= payment.amount_cents
        entries.append(LedgerEntry(payment=payment, balance_after_cents=running_balance))

    entries.reverse()
    return entries
