"""Installment schedule generation for INSTALLMENT credits"""

from datetime import date
from typing import List, Optional
from credit_manager.domain.models import ScheduledInstallment
from credit_manager.utils.date_utils import add_months
from credit_manager.utils.money import round_half_up_div


def build_installment_schedule(
    total_cents: int,
    installments: int,
    date_issued: Optional[date] = None,
) -> List[ScheduledInstallment]:
    """
    Split a credit total into monthly installments.

    Requirements:
    - Every installment but the last is total / installments rounded to the cent
    - Last installment absorbs the rounding remainder so the schedule sums to the total
    - Installment i falls due i calendar months after the issue date

    Args:
        total_cents: Credit total to split
        installments: Number of installments (schedule is empty when < 1)
        date_issued: Issue date; every due date is None when missing

    Returns:
        Ordered list of ScheduledInstallment numbered from 1

    Example:
        100000.00 over 3 -> [33333.33, 33333.33, 33333.34]
    """
    if installments < 1:
        return []

    base_amount = round_half_up_div(total_cents, installments)
    last_amount = total_cents - base_amount * (installments - 1)

    schedule = []
    for number in range(1, installments + 1):
        due_date = add_months(date_issued, number) if date_issued is not None else None
        amount = last_amount if number == installments else base_amount
        schedule.append(ScheduledInstallment(number=number, amount_cents=amount, due_date=due_date))

    return schedule
