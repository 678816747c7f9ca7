"""Portfolio metrics for the operator dashboard"""

from datetime import date
from typing import Iterable
from credit_manager.domain.models import CreditSnapshot, CreditStatus, DashboardMetrics, PaymentRecord
from credit_manager.domain.status import derive_status, outstanding_balance
from credit_manager.utils.date_utils import month_bounds


def compute_dashboard(
    credits: Iterable[CreditSnapshot],
    payments: Iterable[PaymentRecord],
    today: date,
) -> DashboardMetrics:
    """
    Aggregate every credit and payment into dashboard figures.

    Active credits are those with money still owed, which includes overdue ones.
    """
    issued = 0
    collected = 0
    active = 0
    due_today = 0
    overdue = 0

    for credit in credits:
        issued += credit.total_cents
        collected += credit.paid_cents

        outstanding = outstanding_balance(credit.total_cents, credit.paid_cents)
        if outstanding <= 0:
            continue

        active += 1
        if credit.due_date == today:
            due_today += 1
        if derive_status(outstanding, credit.due_date, today) == CreditStatus.OVERDUE:
            overdue += 1

    month_start, month_end = month_bounds(today)
    this_month = sum(p.amount_cents for p in payments if month_start <= p.date <= month_end)

    return DashboardMetrics(
        total_money_issued_cents=issued,
        total_money_collected_cents=collected,
        total_outstanding_cents=issued - collected,
        active_credits=active,
        due_today=due_today,
        overdue_accounts=overdue,
        this_month_collections_cents=this_month,
    )
