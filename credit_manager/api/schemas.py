"""Pydantic schemas for API request/response validation.

Fields are snake_case in Python and camelCase on the wire. Money travels as
plain decimal numbers and is converted to integer cents at this boundary.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from credit_manager.domain.models import (
    CollectionsReport,
    CreditStatus,
    CreditType,
    CustomerTotals,
    DashboardMetrics,
    EnrichedCredit,
    LedgerEntry,
    PaymentRecord,
    RepaymentType,
    ScheduledInstallment,
)
from credit_manager.infrastructure.database.models import Customer
from credit_manager.utils.money import from_cents


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(ApiModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)


# Auth


class LoginRequest(RequestModel):
    """Request body for POST /api/auth/login"""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserSchema(ApiModel):
    id: str
    email: str
    name: str


class TokenResponse(BaseModel):
    """Response for POST /api/auth/login"""

    access_token: str
    token_type: str = "bearer"
    user: UserSchema


# Customers


class CustomerCreateRequest(RequestModel):
    """Request body for POST /api/customers"""

    name: str = Field(..., min_length=1, description="Customer name")
    phone: str = Field(..., min_length=1, description="Unique phone number")


class CustomerUpdateRequest(RequestModel):
    """Request body for PATCH /api/customers/{id}"""

    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)


class CustomerRefSchema(ApiModel):
    id: str
    name: str
    phone: str

    @classmethod
    def from_orm_customer(cls, customer: Customer) -> "CustomerRefSchema":
        return cls(id=str(customer.id), name=customer.name, phone=customer.phone)


class CustomerSchema(CustomerRefSchema):
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_orm_customer(cls, customer: Customer) -> "CustomerSchema":
        return cls(
            id=str(customer.id),
            name=customer.name,
            phone=customer.phone,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )


class CustomerWithStatsSchema(CustomerSchema):
    """Customer plus aggregate borrowing figures"""

    total_borrowed: float
    total_paid: float
    total_outstanding: float
    has_active_credits: bool

    @classmethod
    def build(cls, customer: Customer, totals: CustomerTotals) -> "CustomerWithStatsSchema":
        base = CustomerSchema.from_orm_customer(customer)
        return cls(
            **base.model_dump(),
            total_borrowed=from_cents(totals.total_borrowed_cents),
            total_paid=from_cents(totals.total_paid_cents),
            total_outstanding=from_cents(totals.total_outstanding_cents),
            has_active_credits=totals.has_active_credits,
        )


# Payments


class PaymentCreateRequest(RequestModel):
    """Request body for POST /api/payments"""

    credit_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2)
    paid_on: Optional[date] = Field(None, alias="date", description="Payment date, defaults to today")


class PaymentSchema(ApiModel):
    id: str
    credit_id: str
    amount: float
    paid_on: date = Field(..., alias="date")
    created_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, payment: PaymentRecord) -> "PaymentSchema":
        return cls(
            id=payment.id,
            credit_id=payment.credit_id,
            amount=from_cents(payment.amount_cents),
            paid_on=payment.date,
            created_at=payment.created_at,
        )


class LedgerEntrySchema(PaymentSchema):
    """Payment with the balance left once it was applied"""

    balance_after_payment: float

    @classmethod
    def from_entry(cls, entry: LedgerEntry) -> "LedgerEntrySchema":
        base = PaymentSchema.from_record(entry.payment)
        return cls(**base.model_dump(), balance_after_payment=from_cents(entry.balance_after_cents))


# Credits


class CreditCreateRequest(RequestModel):
    """Request body for POST /api/credits"""

    customer_id: str = Field(..., min_length=1, description="Customer is required")
    type: CreditType
    principal_amount: Decimal = Field(..., gt=0, max_digits=14, decimal_places=2)
    interest_amount: Optional[Decimal] = Field(None, ge=0, max_digits=14, decimal_places=2)
    due_date: Optional[date] = None
    date_issued: date
    repayment_type: RepaymentType
    installments: Optional[int] = Field(None, gt=0)


class InstallmentSchema(ApiModel):
    """Single row of an installment schedule"""

    number: int
    amount: float
    due_date: Optional[date]

    @classmethod
    def from_scheduled(cls, row: ScheduledInstallment) -> "InstallmentSchema":
        return cls(number=row.number, amount=from_cents(row.amount_cents), due_date=row.due_date)


class CreditSchema(ApiModel):
    """Stored credit fields plus everything derived on read"""

    id: str
    customer_id: str
    type: CreditType
    principal_amount: float
    interest_amount: Optional[float]
    total_amount: float
    amount_paid: float
    due_date: Optional[date]
    date_issued: Optional[date]
    repayment_type: RepaymentType
    installments: Optional[int]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    status: CreditStatus
    outstanding_balance: float
    payment_progress: int
    installment_schedule: List[InstallmentSchema]
    payment_history: Optional[List[LedgerEntrySchema]] = None
    customer: Optional[CustomerRefSchema] = None

    @classmethod
    def build(cls, enriched: EnrichedCredit, customer: Optional[Customer] = None) -> "CreditSchema":
        credit = enriched.credit
        history = None
        if enriched.payment_history is not None:
            history = [LedgerEntrySchema.from_entry(e) for e in enriched.payment_history]

        return cls(
            id=credit.id,
            customer_id=credit.customer_id,
            type=credit.type,
            principal_amount=from_cents(credit.principal_cents),
            interest_amount=from_cents(credit.interest_cents) if credit.interest_cents is not None else None,
            total_amount=from_cents(credit.total_cents),
            amount_paid=from_cents(credit.paid_cents),
            due_date=credit.due_date,
            date_issued=credit.date_issued,
            repayment_type=credit.repayment_type,
            installments=credit.installments,
            created_at=credit.created_at,
            updated_at=credit.updated_at,
            status=enriched.status,
            outstanding_balance=from_cents(enriched.outstanding_cents),
            payment_progress=enriched.payment_progress,
            installment_schedule=[InstallmentSchema.from_scheduled(r) for r in enriched.installment_schedule],
            payment_history=history,
            customer=CustomerRefSchema.from_orm_customer(customer) if customer is not None else None,
        )


class CustomerHistoryResponse(ApiModel):
    """Response for GET /api/customers/{id}/history"""

    customer: CustomerSchema
    credits: List[CreditSchema]


class RecordedPaymentResponse(ApiModel):
    """Response for POST /api/payments"""

    payment: PaymentSchema
    credit: CreditSchema


# Dashboard & reports


class DashboardResponse(ApiModel):
    """Response for GET /api/dashboard"""

    total_money_issued: float
    total_money_collected: float
    total_outstanding: float
    active_credits: int
    due_today: int
    overdue_accounts: int
    this_month_collections: float

    @classmethod
    def from_metrics(cls, metrics: DashboardMetrics) -> "DashboardResponse":
        return cls(
            total_money_issued=from_cents(metrics.total_money_issued_cents),
            total_money_collected=from_cents(metrics.total_money_collected_cents),
            total_outstanding=from_cents(metrics.total_outstanding_cents),
            active_credits=metrics.active_credits,
            due_today=metrics.due_today,
            overdue_accounts=metrics.overdue_accounts,
            this_month_collections=from_cents(metrics.this_month_collections_cents),
        )


class ReportResponse(ApiModel):
    """Response for GET /api/reports"""

    filter: str
    start: date
    end: date
    payments_count: int
    total_collected: float
    credits_issued_count: int
    total_issued: float
    payments: List[PaymentSchema]

    @classmethod
    def from_report(cls, filter_name: str, report: CollectionsReport) -> "ReportResponse":
        return cls(
            filter=filter_name,
            start=report.start,
            end=report.end,
            payments_count=report.payments_count,
            total_collected=from_cents(report.collected_cents),
            credits_issued_count=report.credits_issued_count,
            total_issued=from_cents(report.issued_cents),
            payments=[PaymentSchema.from_record(p) for p in report.payments],
        )
