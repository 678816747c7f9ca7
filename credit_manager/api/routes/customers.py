"""Customer registry endpoints under /api/customers"""

import logging
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from credit_manager.api.dependencies import get_current_user, get_request_id, get_today, parse_id
from credit_manager.api.schemas import (
    CreditSchema,
    CustomerCreateRequest,
    CustomerHistoryResponse,
    CustomerSchema,
    CustomerUpdateRequest,
    CustomerWithStatsSchema,
)
from credit_manager.domain.exceptions import CustomerNotFoundError, DuplicatePhoneError
from credit_manager.infrastructure.database.session import get_db
from credit_manager.services import customers as customer_service

router = APIRouter(dependencies=[Depends(get_current_user)])

NOT_FOUND = "Customer not found"


@router.get("/customers", response_model=List[CustomerWithStatsSchema])
def list_customers(
    search: Optional[str] = Query(None, description="Substring of name or phone"),
    db: Session = Depends(get_db),
):
    """Customers newest first with borrowing totals"""
    return [CustomerWithStatsSchema.build(c.customer, c.totals) for c in customer_service.list_customers(db, search)]


@router.post("/customers", response_model=CustomerSchema, status_code=201)
def create_customer(request_body: CustomerCreateRequest, request: Request, db: Session = Depends(get_db)):
    try:
        customer = customer_service.create_customer(db, request_body.name, request_body.phone)
    except DuplicatePhoneError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        db.rollback()
        logging.error(f"Create customer error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Internal server error")

    return CustomerSchema.from_orm_customer(customer)


@router.get("/customers/{customer_id}", response_model=CustomerWithStatsSchema)
def get_customer(customer_id: str, db: Session = Depends(get_db)):
    try:
        result = customer_service.get_customer(db, parse_id(customer_id, NOT_FOUND))
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return CustomerWithStatsSchema.build(result.customer, result.totals)


@router.patch("/customers/{customer_id}", response_model=CustomerSchema)
def update_customer(
    customer_id: str,
    request_body: CustomerUpdateRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    try:
        customer = customer_service.update_customer(
            db,
            parse_id(customer_id, NOT_FOUND),
            name=request_body.name,
            phone=request_body.phone,
        )
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DuplicatePhoneError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logging.error(f"Update customer error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=500, detail="Internal server error")

    return CustomerSchema.from_orm_customer(customer)


@router.get("/customers/{customer_id}/history", response_model=CustomerHistoryResponse)
def get_customer_history(
    customer_id: str,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    Customer profile with every credit, newest first.

    Each credit carries its derived status and payment ledger.
    """
    try:
        history = customer_service.get_customer_history(db, parse_id(customer_id, NOT_FOUND), today)
    except CustomerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return CustomerHistoryResponse(
        customer=CustomerSchema.from_orm_customer(history.customer),
        credits=[CreditSchema.build(c) for c in history.credits],
    )
