"""GET /api/dashboard and GET /api/reports - portfolio figures"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from credit_manager.api.dependencies import get_current_user, get_today
from credit_manager.api.schemas import DashboardResponse, ReportResponse
from credit_manager.domain.exceptions import InvalidReportPeriodError
from credit_manager.infrastructure.database.session import get_db
from credit_manager.services import reporting

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(db: Session = Depends(get_db), today: date = Depends(get_today)):
    return DashboardResponse.from_metrics(reporting.get_dashboard(db, today))


@router.get("/reports", response_model=ReportResponse)
def get_report(
    filter: str = Query("today", description="today | week | month | custom"),
    date_from: Optional[date] = Query(None, alias="from"),
    date_to: Optional[date] = Query(None, alias="to"),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Collections and issuance over a period.

    Custom periods need both `from` and `to` (inclusive).
    """
    try:
        report = reporting.get_collections_report(db, filter, today, date_from, date_to)
    except InvalidReportPeriodError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ReportResponse.from_report(filter, report)
