"""Credit status derivation.

Status is never stored. It is recomputed on every read from the outstanding
balance, the optional due date and the evaluation date supplied by the caller.
"""

from datetime import date
from typing import Optional
from credit_manager.domain.models import CreditStatus
from credit_manager.utils.money import round_half_up_div


def outstanding_balance(total_cents: int, paid_cents: int) -> int:
    """Amount still owed; negative when the credit has been overpaid"""
    return total_cents - paid_cents


def payment_progress(total_cents: int, paid_cents: int) -> int:
    """Percentage of the total repaid, rounded half-up to a whole number"""
    if total_cents <= 0:
        return 0
    return round_half_up_div(paid_cents * 100, total_cents)


def derive_status(outstanding_cents: int, due_date: Optional[date], today: date) -> CreditStatus:
    """
    Derive lifecycle status in priority order:

    1. Nothing left to pay -> COMPLETED, even past the due date
    2. Due date set and already passed -> OVERDUE
    3. Otherwise -> ACTIVE (a credit without due date is never overdue)
    """
    if outstanding_cents <= 0:
        return CreditStatus.COMPLETED
    if due_date is not None and today > due_date:
        return CreditStatus.OVERDUE
    return CreditStatus.ACTIVE
