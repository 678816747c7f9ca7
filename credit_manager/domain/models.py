"""Domain models - pure Python dataclasses representing business entities"""

import enum
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional


class CreditType(str, enum.Enum):
    CASH_LOAN = "CASH_LOAN"
    SERVICE_CREDIT = "SERVICE_CREDIT"


class RepaymentType(str, enum.Enum):
    ONE_TIME = "ONE_TIME"
    INSTALLMENT = "INSTALLMENT"
    FLEXIBLE = "FLEXIBLE"


class CreditStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    OVERDUE = "OVERDUE"


@dataclass
class PaymentRecord:
    """Payment as read from storage"""

    id: str
    credit_id: str
    amount_cents: int
    date: date
    created_at: Optional[datetime] = None


@dataclass
class CreditSnapshot:
    """Immutable view of a stored credit handed to the evaluator"""

    id: str
    customer_id: str
    type: CreditType
    principal_cents: int
    interest_cents: Optional[int]
    total_cents: int
    paid_cents: int
    due_date: Optional[date]
    date_issued: Optional[date]
    repayment_type: RepaymentType
    installments: Optional[int]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    payments: List[PaymentRecord] = field(default_factory=list)


@dataclass
class ScheduledInstallment:
    """Single projected payment in an installment schedule"""

    number: int
    amount_cents: int
    due_date: Optional[date]


@dataclass
class LedgerEntry:
    """Payment annotated with the balance left after it was applied"""

    payment: PaymentRecord
    balance_after_cents: int


@dataclass
class EnrichedCredit:
    """Credit plus every value derived on read"""

    credit: CreditSnapshot
    status: CreditStatus
    outstanding_cents: int
    payment_progress: int
    installment_schedule: List[ScheduledInstallment]
    payment_history: Optional[List[LedgerEntry]] = None


@dataclass
class CustomerTotals:
    """Aggregate borrowing figures for one customer"""

    total_borrowed_cents: int
    total_paid_cents: int
    total_outstanding_cents: int
    has_active_credits: bool


@dataclass
class DashboardMetrics:
    """Portfolio-wide figures for the operator dashboard"""

    total_money_issued_cents: int
    total_money_collected_cents: int
    total_outstanding_cents: int
    active_credits: int
    due_today: int
    overdue_accounts: int
    this_month_collections_cents: int


@dataclass
class CollectionsReport:
    """Money in and money out over a reporting window"""

    start: date
    end: date
    payments_count: int
    collected_cents: int
    credits_issued_count: int
    issued_cents: int
    payments: List[PaymentRecord]
