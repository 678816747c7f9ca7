"""Unit tests for dashboard metrics and collections reports"""

import pytest
from datetime import date, timedelta
from conftest import make_credit, make_payment
from credit_manager.domain.dashboard import compute_dashboard
from credit_manager.domain.exceptions import InvalidReportPeriodError
from credit_manager.domain.reports import build_collections_report, resolve_period

TODAY = date(2024, 6, 15)  # a Saturday


def test_dashboard_metrics():
    credits = [
        make_credit(total_cents=1_000_000, paid_cents=1_000_000, due_date=TODAY - timedelta(days=5)),
        make_credit(total_cents=2_000_000, paid_cents=500_000, due_date=TODAY - timedelta(days=1)),
        make_credit(total_cents=500_000, paid_cents=0, due_date=TODAY),
        make_credit(total_cents=300_000, paid_cents=100_000),
    ]
    payments = [
        make_payment("old", 1_000_000, date(2024, 5, 30)),
        make_payment("june-1", 500_000, date(2024, 6, 1)),
        make_payment("june-2", 100_000, date(2024, 6, 14)),
    ]

    metrics = compute_dashboard(credits, payments, TODAY)

    assert metrics.total_money_issued_cents == 3_800_000
    assert metrics.total_money_collected_cents == 1_600_000
    assert metrics.total_outstanding_cents == 2_200_000
    assert metrics.active_credits == 3
    assert metrics.due_today == 1
    assert metrics.overdue_accounts == 1
    assert metrics.this_month_collections_cents == 600_000


def test_dashboard_empty_portfolio():
    metrics = compute_dashboard([], [], TODAY)

    assert metrics.total_money_issued_cents == 0
    assert metrics.active_credits == 0
    assert metrics.this_month_collections_cents == 0


@pytest.mark.parametrize(
    "filter_name, expected",
    [
        ("today", (TODAY, TODAY)),
        ("week", (date(2024, 6, 10), TODAY)),
        ("month", (date(2024, 6, 1), TODAY)),
    ],
)
def test_resolve_period_presets(filter_name, expected):
    assert resolve_period(filter_name, TODAY) == expected


def test_resolve_custom_period():
    assert resolve_period("custom", TODAY, date(2024, 1, 1), date(2024, 3, 31)) == (date(2024, 1, 1), date(2024, 3, 31))


def test_custom_period_requires_both_bounds():
    with pytest.raises(InvalidReportPeriodError):
        resolve_period("custom", TODAY, date(2024, 1, 1), None)


def test_custom_period_rejects_reversed_bounds():
    with pytest.raises(InvalidReportPeriodError):
        resolve_period("custom", TODAY, date(2024, 3, 1), date(2024, 1, 1))


def test_unknown_filter_rejected():
    with pytest.raises(InvalidReportPeriodError):
        resolve_period("year", TODAY)


def test_collections_report_window_is_inclusive():
    credits = [
        make_credit(total_cents=1_000_000, date_issued=date(2024, 6, 1)),
        make_credit(total_cents=250_000, date_issued=date(2024, 6, 15)),
        make_credit(total_cents=900_000, date_issued=date(2024, 5, 31)),
    ]
    payments = [
        make_payment("before", 10_000, date(2024, 5, 31)),
        make_payment("start", 20_000, date(2024, 6, 1)),
        make_payment("end", 30_000, date(2024, 6, 15)),
    ]

    report = build_collections_report(credits, payments, date(2024, 6, 1), date(2024, 6, 15))

    assert report.payments_count == 2
    assert report.collected_cents == 50_000
    assert [p.id for p in report.payments] == ["end", "start"]
    assert report.credits_issued_count == 2
    assert report.issued_cents == 1_250_000
