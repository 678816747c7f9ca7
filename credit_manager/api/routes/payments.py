"""Payment endpoints under /api/payments"""

import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from credit_manager.api.dependencies import get_current_user, get_request_id, get_today, parse_id
from credit_manager.api.schemas import CreditSchema, PaymentCreateRequest, PaymentSchema, RecordedPaymentResponse
from credit_manager.domain.exceptions import CreditNotFoundError, InvalidPaymentError
from credit_manager.infrastructure.database.session import get_db
from credit_manager.services import payments as payment_service
from credit_manager.utils.money import to_cents

router = APIRouter(dependencies=[Depends(get_current_user)])

NOT_FOUND = "Credit not found"


@router.post("/payments", response_model=RecordedPaymentResponse, status_code=201)
def record_payment(
    request_body: PaymentCreateRequest,
    request: Request,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Record a repayment and return it with the updated credit"""
    request_id = get_request_id(request)

    try:
        result = payment_service.record_payment_for_credit(
            db,
            credit_id=parse_id(request_body.credit_id, NOT_FOUND),
            amount_cents=to_cents(request_body.amount),
            paid_on=request_body.paid_on or today,
            today=today,
        )

    except CreditNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidPaymentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    except HTTPException:
        raise

    except Exception as e:
        logging.error(f"Record payment error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return RecordedPaymentResponse(
        payment=PaymentSchema.from_record(result.payment),
        credit=CreditSchema.build(result.credit),
    )


@router.get("/payments/credit/{credit_id}", response_model=List[PaymentSchema])
def list_payments(credit_id: str, db: Session = Depends(get_db)):
    try:
        payments = payment_service.list_payments_for_credit(db, parse_id(credit_id, NOT_FOUND))
    except CreditNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return [PaymentSchema.from_record(p) for p in payments]
