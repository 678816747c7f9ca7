"""Payment use cases: recording repayments atomically and listing them"""

import uuid
from datetime import date
from typing import List, NamedTuple
from sqlalchemy.orm import Session

from credit_manager.domain.enrichment import enrich_credit
from credit_manager.domain.exceptions import CreditNotFoundError, InvalidPaymentError
from credit_manager.domain.models import EnrichedCredit, PaymentRecord
from credit_manager.infrastructure.database.repositories import (
    CreditRepository,
    PaymentRepository,
    to_payment_record,
    to_snapshot,
)
from credit_manager.infrastructure.observability.logging import log_payment_recorded
from credit_manager.infrastructure.observability.metrics import record_payment


class RecordedPayment(NamedTuple):
    payment: PaymentRecord
    credit: EnrichedCredit


def record_payment_for_credit(
    db: Session,
    credit_id: uuid.UUID,
    amount_cents: int,
    paid_on: date,
    today: date,
) -> RecordedPayment:
    """
    Insert a payment and increment the credit's amount paid in one transaction.

    Either both writes commit or neither does. Overpayment is accepted and
    shows up as a negative outstanding balance.

    Raises:
        CreditNotFoundError: Unknown credit id
        InvalidPaymentError: Amount is not positive
    """
    if amount_cents <= 0:
        raise InvalidPaymentError("Payment amount must be positive")

    try:
        credit = CreditRepository(db).get_by_id(credit_id, for_update=True)
        if credit is None:
            raise CreditNotFoundError("Credit not found")

        payment = PaymentRepository(db).create_payment(credit, amount_cents, paid_on)
        db.commit()
    except Exception:
        db.rollback()
        raise

    enriched = enrich_credit(to_snapshot(credit, with_payments=True), today, include_history=True)

    record_payment(amount_cents, enriched.outstanding_cents)
    log_payment_recorded(str(payment.id), str(credit.id), amount_cents, enriched.outstanding_cents)

    return RecordedPayment(payment=to_payment_record(payment), credit=enriched)


def list_payments_for_credit(db: Session, credit_id: uuid.UUID) -> List[PaymentRecord]:
    """
    Payments of a credit, newest first.

    Raises:
        CreditNotFoundError: Unknown credit id
    """
    if CreditRepository(db).get_by_id(credit_id) is None:
        raise CreditNotFoundError("Credit not found")

    payments = [to_payment_record(p) for p in PaymentRepository(db).list_by_credit(credit_id)]
    # Stable sort: same-day payments stay in creation order before the reversal
    payments.sort(key=lambda p: p.date)
    payments.reverse()
    return payments
