"""Read-time enrichment of stored credits with derived values"""

from datetime import date
from credit_manager.domain.installments import build_installment_schedule
from credit_manager.domain.ledger import build_payment_history
from credit_manager.domain.models import CreditSnapshot, EnrichedCredit, RepaymentType
from credit_manager.domain.status import derive_status, outstanding_balance, payment_progress


def enrich_credit(credit: CreditSnapshot, today: date, include_history: bool = False) -> EnrichedCredit:
    """
    Compute status, balance, progress and schedule for a stored credit.

    Detail views pass `include_history=True` to also rebuild the payment
    ledger from `credit.payments`.
    """
    outstanding = outstanding_balance(credit.total_cents, credit.paid_cents)

    schedule = []
    if credit.repayment_type == RepaymentType.INSTALLMENT and credit.installments:
        schedule = build_installment_schedule(credit.total_cents, credit.installments, credit.date_issued)

    history = build_payment_history(credit.total_cents, credit.payments) if include_history else None

    return EnrichedCredit(
        credit=credit,
        status=derive_status(outstanding, credit.due_date, today),
        outstanding_cents=outstanding,
        payment_progress=payment_progress(credit.total_cents, credit.paid_cents),
        installment_schedule=schedule,
        payment_history=history,
    )
