"""Dashboard and collections report use cases"""

from datetime import date
from typing import Optional
from sqlalchemy.orm import Session

from credit_manager.domain.dashboard import compute_dashboard
from credit_manager.domain.models import CollectionsReport, DashboardMetrics
from credit_manager.domain.reports import build_collections_report, resolve_period
from credit_manager.infrastructure.database.repositories import (
    CreditRepository,
    PaymentRepository,
    to_payment_record,
    to_snapshot,
)


def get_dashboard(db: Session, today: date) -> DashboardMetrics:
    credits = [to_snapshot(c) for c in CreditRepository(db).list_credits()]
    payments = [to_payment_record(p) for p in PaymentRepository(db).list_all()]
    return compute_dashboard(credits, payments, today)


def get_collections_report(
    db: Session,
    filter_name: str,
    today: date,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> CollectionsReport:
    """
    Raises:
        InvalidReportPeriodError: Unknown filter or bad custom bounds
    """
    start, end = resolve_period(filter_name, today, date_from, date_to)
    credits = [to_snapshot(c) for c in CreditRepository(db).list_credits()]
    payments = [to_payment_record(p) for p in PaymentRepository(db).list_all()]
    return build_collections_report(credits, payments, start, end)
