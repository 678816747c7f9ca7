"""Credit endpoints under /api/credits"""

import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from credit_manager.api.dependencies import get_current_user, get_request_id, get_today, parse_id
from credit_manager.api.schemas import CreditCreateRequest, CreditSchema
from credit_manager.domain.exceptions import CreditNotFoundError, CustomerNotFoundError, InvalidCreditError
from credit_manager.infrastructure.database.session import get_db
from credit_manager.services import credits as credit_service
from credit_manager.utils.money import optional_cents, to_cents

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("/credits", response_model=CreditSchema, status_code=201)
def create_credit(
    request_body: CreditCreateRequest,
    request: Request,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Issue credit to a customer.

    Flow:
    1. Check the customer exists
    2. Validate repayment rules (INSTALLMENT needs an installment count)
    3. Fix total = principal + interest and persist
    4. Return the credit enriched with status and schedule
    """
    request_id = get_request_id(request)

    try:
        view = credit_service.create_credit(
            db,
            customer_id=parse_id(request_body.customer_id, "Customer not found"),
            credit_type=request_body.type,
            principal_cents=to_cents(request_body.principal_amount),
            interest_cents=optional_cents(request_body.interest_amount),
            due_date=request_body.due_date,
            date_issued=request_body.date_issued,
            repayment_type=request_body.repayment_type,
            installments=request_body.installments,
            today=today,
        )

    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    except InvalidCreditError as e:
        logging.warning(f"Credit rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except HTTPException:
        raise

    except Exception as e:
        db.rollback()
        logging.error(f"Create credit error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return CreditSchema.build(view.credit, view.customer)


@router.get("/credits", response_model=List[CreditSchema])
def list_credits(db: Session = Depends(get_db), today: date = Depends(get_today)):
    """All credits newest first with derived status"""
    return [CreditSchema.build(v.credit, v.customer) for v in credit_service.list_credits(db, today)]


@router.get("/credits/{credit_id}", response_model=CreditSchema)
def get_credit(credit_id: str, db: Session = Depends(get_db), today: date = Depends(get_today)):
    """
    Credit detail.

    Returns:
        Credit with status, schedule and payment history (newest first,
        each entry carrying the balance after that payment)
    """
    try:
        view = credit_service.get_credit(db, parse_id(credit_id, "Credit not found"), today)
    except CreditNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return CreditSchema.build(view.credit, view.customer)
