"""Collections reporting over a date window"""

from datetime import date
from typing import Iterable, Optional, Tuple
from credit_manager.domain.exceptions import InvalidReportPeriodError
from credit_manager.domain.models import CollectionsReport, CreditSnapshot, PaymentRecord
from credit_manager.utils.date_utils import start_of_week

REPORT_FILTERS = ("today", "week", "month", "custom")


def resolve_period(
    filter_name: str,
    today: date,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> Tuple[date, date]:
    """
    Turn a report filter into inclusive (start, end) dates.

    - today: just today
    - week: Monday of this week through today
    - month: first of this month through today
    - custom: caller supplied bounds, both required and ordered

    Raises:
        InvalidReportPeriodError: Unknown filter or unusable custom bounds
    """
    if filter_name == "today":
        return today, today
    if filter_name == "week":
        return start_of_week(today), today
    if filter_name == "month":
        return today.replace(day=1), today
    if filter_name == "custom":
        if date_from is None or date_to is None:
            raise InvalidReportPeriodError("Custom reports require both 'from' and 'to' dates")
        if date_from > date_to:
            raise InvalidReportPeriodError("'from' date must not be after 'to' date")
        return date_from, date_to

    raise InvalidReportPeriodError(f"Unknown report filter '{filter_name}', expected one of {', '.join(REPORT_FILTERS)}")


def build_collections_report(
    credits: Iterable[CreditSnapshot],
    payments: Iterable[PaymentRecord],
    start: date,
    end: date,
) -> CollectionsReport:
    """Summarize payments received and credits issued between start and end inclusive"""
    in_window = [p for p in payments if start <= p.date <= end]
    # Newest first; stable sort keeps storage order for same-day payments
    in_window.sort(key=lambda p: p.date, reverse=True)

    issued = [c for c in credits if c.date_issued is not None and start <= c.date_issued <= end]

    return CollectionsReport(
        start=start,
        end=end,
        payments_count=len(in_window),
        collected_cents=sum(p.amount_cents for p in in_window),
        credits_issued_count=len(issued),
        issued_cents=sum(c.total_cents for c in issued),
        payments=in_window,
    )
