"""Customer use cases: registry, profile edits and borrowing history"""

import uuid
from datetime import date
from typing import List, NamedTuple, Optional
from sqlalchemy.orm import Session

from credit_manager.domain.enrichment import enrich_credit
from credit_manager.domain.exceptions import CustomerNotFoundError, DuplicatePhoneError
from credit_manager.domain.models import CustomerTotals, EnrichedCredit
from credit_manager.domain.summary import summarize_credits
from credit_manager.infrastructure.database.models import Customer
from credit_manager.infrastructure.database.repositories import CreditRepository, CustomerRepository, to_snapshot


class CustomerWithTotals(NamedTuple):
    customer: Customer
    totals: CustomerTotals


class CustomerHistory(NamedTuple):
    customer: Customer
    credits: List[EnrichedCredit]


def _with_totals(customer: Customer) -> CustomerWithTotals:
    totals = summarize_credits((c.total_cents, c.amount_paid_cents) for c in customer.credits)
    return CustomerWithTotals(customer=customer, totals=totals)


def _require_customer(repo: CustomerRepository, customer_id: uuid.UUID) -> Customer:
    customer = repo.get_by_id(customer_id)
    if customer is None:
        raise CustomerNotFoundError("Customer not found")
    return customer


def list_customers(db: Session, search: Optional[str] = None) -> List[CustomerWithTotals]:
    repo = CustomerRepository(db)
    return [_with_totals(c) for c in repo.list_customers(search.strip() if search else None)]


def get_customer(db: Session, customer_id: uuid.UUID) -> CustomerWithTotals:
    return _with_totals(_require_customer(CustomerRepository(db), customer_id))


def create_customer(db: Session, name: str, phone: str) -> Customer:
    """
    Register a customer.

    Raises:
        DuplicatePhoneError: Phone number already belongs to another customer
    """
    repo = CustomerRepository(db)
    if repo.get_by_phone(phone) is not None:
        raise DuplicatePhoneError("A customer with this phone number already exists")

    customer = repo.create_customer(name=name, phone=phone)
    db.commit()
    return customer


def update_customer(
    db: Session,
    customer_id: uuid.UUID,
    name: Optional[str] = None,
    phone: Optional[str] = None,
) -> Customer:
    """
    Edit a customer's name and/or phone.

    Raises:
        CustomerNotFoundError: Unknown customer id
        DuplicatePhoneError: New phone number already belongs to another customer
    """
    repo = CustomerRepository(db)
    customer = _require_customer(repo, customer_id)

    if phone and phone != customer.phone and repo.get_by_phone(phone) is not None:
        raise DuplicatePhoneError("A customer with this phone number already exists")

    if name:
        customer.name = name
    if phone:
        customer.phone = phone
    db.commit()
    return customer


def get_customer_history(db: Session, customer_id: uuid.UUID, today: date) -> CustomerHistory:
    """Customer with every credit, newest first, enriched with its payment ledger"""
    customer = _require_customer(CustomerRepository(db), customer_id)
    credits = CreditRepository(db).list_by_customer(customer_id)
    enriched = [enrich_credit(to_snapshot(c, with_payments=True), today, include_history=True) for c in credits]
    return CustomerHistory(customer=customer, credits=enriched)
