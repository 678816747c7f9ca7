"""Unit tests for read-time credit enrichment"""

from datetime import date, timedelta
from conftest import make_credit, make_payment
from credit_manager.domain.enrichment import enrich_credit
from credit_manager.domain.models import CreditStatus, RepaymentType

TODAY = date(2024, 6, 15)


def test_fresh_credit_without_due_date_is_active():
    """total 50000, nothing paid, no due date -> ACTIVE, progress 0"""
    enriched = enrich_credit(make_credit(total_cents=5_000_000), TODAY)

    assert enriched.status == CreditStatus.ACTIVE
    assert enriched.outstanding_cents == 5_000_000
    assert enriched.payment_progress == 0
    assert enriched.installment_schedule == []
    assert enriched.payment_history is None


def test_fully_paid_credit_past_due_is_completed():
    """total 50000, paid 50000, due date in the past -> COMPLETED"""
    credit = make_credit(total_cents=5_000_000, paid_cents=5_000_000, due_date=TODAY - timedelta(days=30))

    enriched = enrich_credit(credit, TODAY)

    assert enriched.status == CreditStatus.COMPLETED
    assert enriched.outstanding_cents == 0
    assert enriched.payment_progress == 100


def test_partially_paid_credit_due_yesterday_is_overdue():
    """total 20000, paid 5000, due yesterday -> OVERDUE with 15000 left"""
    credit = make_credit(total_cents=2_000_000, paid_cents=500_000, due_date=TODAY - timedelta(days=1))

    enriched = enrich_credit(credit, TODAY)

    assert enriched.status == CreditStatus.OVERDUE
    assert enriched.outstanding_cents == 1_500_000
    assert enriched.payment_progress == 25


def test_installment_credit_gets_schedule():
    credit = make_credit(
        total_cents=10_000_000,
        repayment_type=RepaymentType.INSTALLMENT,
        installments=3,
        date_issued=date(2024, 1, 15),
    )

    enriched = enrich_credit(credit, TODAY)

    assert [row.amount_cents for row in enriched.installment_schedule] == [3_333_333, 3_333_333, 3_333_334]
    assert enriched.installment_schedule[0].due_date == date(2024, 2, 15)


def test_non_installment_credit_never_gets_schedule():
    for repayment_type in (RepaymentType.ONE_TIME, RepaymentType.FLEXIBLE):
        credit = make_credit(repayment_type=repayment_type, installments=4)
        assert enrich_credit(credit, TODAY).installment_schedule == []


def test_history_included_on_request():
    payments = [
        make_payment("p1", 300_000, date(2024, 2, 1)),
        make_payment("p2", 700_000, date(2024, 3, 1)),
    ]
    credit = make_credit(total_cents=1_000_000, paid_cents=1_000_000, payments=payments)

    enriched = enrich_credit(credit, TODAY, include_history=True)

    assert [e.balance_after_cents for e in enriched.payment_history] == [0, 700_000]
    assert enriched.payment_history[0].balance_after_cents == enriched.outstanding_cents
