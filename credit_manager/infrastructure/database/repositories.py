"""Data access layer for customers, credits, payments and operators"""

import uuid
from datetime import date
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload
from credit_manager.infrastructure.database.models import Credit, Customer, Payment, User
from credit_manager.domain.models import CreditSnapshot, CreditType, PaymentRecord, RepaymentType


def to_payment_record(payment: Payment) -> PaymentRecord:
    return PaymentRecord(
        id=str(payment.id),
        credit_id=str(payment.credit_id),
        amount_cents=payment.amount_cents,
        date=payment.date,
        created_at=payment.created_at,
    )


def to_snapshot(credit: Credit, with_payments: bool = False) -> CreditSnapshot:
    """Detach a credit row into the plain snapshot the evaluator works on"""
    return CreditSnapshot(
        id=str(credit.id),
        customer_id=str(credit.customer_id),
        type=credit.type,
        principal_cents=credit.principal_cents,
        interest_cents=credit.interest_cents,
        total_cents=credit.total_cents,
        paid_cents=credit.amount_paid_cents,
        due_date=credit.due_date,
        date_issued=credit.date_issued,
        repayment_type=credit.repayment_type,
        installments=credit.installments,
        created_at=credit.created_at,
        updated_at=credit.updated_at,
        payments=[to_payment_record(p) for p in credit.payments] if with_payments else [],
    )


class UserRepository:
    """Repository for operator accounts"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return self.db.get(User, user_id)

    def create_user(self, email: str, name: str, password_hash: str) -> User:
        user = User(email=email, name=name, password_hash=password_hash)
        self.db.add(user)
        self.db.flush()
        return user


class CustomerRepository:
    """Repository for customers"""

    def __init__(self, db: Session):
        self.db = db

    def list_customers(self, search: Optional[str] = None) -> List[Customer]:
        """Fetch customers newest first, optionally filtered by name or phone substring"""
        query = self.db.query(Customer).options(selectinload(Customer.credits))
        if search:
            pattern = f"%{search}%"
            query = query.filter(or_(Customer.name.ilike(pattern), Customer.phone.ilike(pattern)))
        return query.order_by(Customer.created_at.desc()).all()

    def get_by_id(self, customer_id: uuid.UUID) -> Optional[Customer]:
        return self.db.get(Customer, customer_id)

    def get_by_phone(self, phone: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.phone == phone).first()

    def create_customer(self, name: str, phone: str) -> Customer:
        customer = Customer(name=name, phone=phone)
        self.db.add(customer)
        self.db.flush()
        return customer


class CreditRepository:
    """Repository for credits"""

    def __init__(self, db: Session):
        self.db = db

    def create_credit(
        self,
        customer_id: uuid.UUID,
        credit_type: CreditType,
        principal_cents: int,
        interest_cents: Optional[int],
        total_cents: int,
        due_date: Optional[date],
        date_issued: date,
        repayment_type: RepaymentType,
        installments: Optional[int],
    ) -> Credit:
        """Persist a new credit with nothing paid yet"""
        credit = Credit(
            customer_id=customer_id,
            type=credit_type,
            principal_cents=principal_cents,
            interest_cents=interest_cents,
            total_cents=total_cents,
            amount_paid_cents=0,
            due_date=due_date,
            date_issued=date_issued,
            repayment_type=repayment_type,
            installments=installments,
        )
        self.db.add(credit)
        self.db.flush()
        return credit

    def list_credits(self) -> List[Credit]:
        """Fetch all credits newest first with their customer"""
        return (
            self.db.query(Credit)
            .options(selectinload(Credit.customer))
            .order_by(Credit.created_at.desc())
            .all()
        )

    def list_by_customer(self, customer_id: uuid.UUID) -> List[Credit]:
        return (
            self.db.query(Credit)
            .options(selectinload(Credit.payments))
            .filter(Credit.customer_id == customer_id)
            .order_by(Credit.created_at.desc())
            .all()
        )

    def get_by_id(self, credit_id: uuid.UUID, for_update: bool = False) -> Optional[Credit]:
        query = self.db.query(Credit).filter(Credit.id == credit_id)
        if for_update:
            query = query.with_for_update()
        return query.first()


class PaymentRepository:
    """Repository for payments"""

    def __init__(self, db: Session):
        self.db = db

    def create_payment(self, credit: Credit, amount_cents: int, paid_on: date) -> Payment:
        """
        Insert a payment and raise the credit's amount paid by the same amount.

        Both writes land in the caller's transaction; nothing is committed here.
        """
        payment = Payment(credit_id=credit.id, amount_cents=amount_cents, date=paid_on)
        self.db.add(payment)
        credit.amount_paid_cents = Credit.amount_paid_cents + amount_cents
        self.db.flush()
        self.db.refresh(credit)
        return payment

    def list_by_credit(self, credit_id: uuid.UUID) -> List[Payment]:
        """Fetch payments in creation order"""
        return (
            self.db.query(Payment)
            .filter(Payment.credit_id == credit_id)
            .order_by(Payment.created_at.asc())
            .all()
        )

    def list_all(self) -> List[Payment]:
        return self.db.query(Payment).order_by(Payment.created_at.asc()).all()
