"""Credit use cases: issuing credit and reading it back enriched"""

import uuid
from datetime import date
from typing import List, NamedTuple, Optional
from sqlalchemy.orm import Session

from credit_manager.domain.enrichment import enrich_credit
from credit_manager.domain.exceptions import CreditNotFoundError, CustomerNotFoundError, InvalidCreditError
from credit_manager.domain.models import CreditType, EnrichedCredit, RepaymentType
from credit_manager.infrastructure.database.models import Customer
from credit_manager.infrastructure.database.repositories import CreditRepository, CustomerRepository, to_snapshot
from credit_manager.infrastructure.observability.logging import log_credit_created
from credit_manager.infrastructure.observability.metrics import record_credit_issued


class CreditView(NamedTuple):
    credit: EnrichedCredit
    customer: Customer


def create_credit(
    db: Session,
    customer_id: uuid.UUID,
    credit_type: CreditType,
    principal_cents: int,
    date_issued: date,
    repayment_type: RepaymentType,
    today: date,
    interest_cents: Optional[int] = None,
    due_date: Optional[date] = None,
    installments: Optional[int] = None,
) -> CreditView:
    """
    Issue a credit to an existing customer.

    Interest is optional; total = principal + interest is fixed here and never
    recomputed. Installment counts are only kept for INSTALLMENT credits.

    Raises:
        CustomerNotFoundError: Unknown customer id
        InvalidCreditError: Non-positive principal, negative interest, or
            INSTALLMENT repayment without at least one installment
    """
    customer = CustomerRepository(db).get_by_id(customer_id)
    if customer is None:
        raise CustomerNotFoundError("Customer not found")

    if principal_cents <= 0:
        raise InvalidCreditError("Principal amount must be positive")
    if interest_cents is not None and interest_cents < 0:
        raise InvalidCreditError("Interest amount cannot be negative")

    if repayment_type == RepaymentType.INSTALLMENT:
        if not installments or installments < 1:
            raise InvalidCreditError("Installment repayment requires number of installments")
    else:
        installments = None

    total_cents = principal_cents + (interest_cents or 0)

    credit = CreditRepository(db).create_credit(
        customer_id=customer.id,
        credit_type=credit_type,
        principal_cents=principal_cents,
        interest_cents=interest_cents,
        total_cents=total_cents,
        due_date=due_date,
        date_issued=date_issued,
        repayment_type=repayment_type,
        installments=installments,
    )
    db.commit()

    record_credit_issued(credit_type.value, repayment_type.value)
    log_credit_created(str(credit.id), str(customer.id), credit_type.value, total_cents)

    return CreditView(credit=enrich_credit(to_snapshot(credit), today), customer=customer)


def list_credits(db: Session, today: date) -> List[CreditView]:
    return [
        CreditView(credit=enrich_credit(to_snapshot(c), today), customer=c.customer)
        for c in CreditRepository(db).list_credits()
    ]


def get_credit(db: Session, credit_id: uuid.UUID, today: date) -> CreditView:
    """
    Credit detail including the payment ledger.

    Raises:
        CreditNotFoundError: Unknown credit id
    """
    credit = CreditRepository(db).get_by_id(credit_id)
    if credit is None:
        raise CreditNotFoundError("Credit not found")

    enriched = enrich_credit(to_snapshot(credit, with_payments=True), today, include_history=True)
    return CreditView(credit=enriched, customer=credit.customer)
