"""SQLAlchemy ORM models for operators, customers, credits and payments"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, BigInteger, DateTime, Date, Integer, ForeignKey, Text, Enum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base, relationship

from credit_manager.domain.models import CreditType, RepaymentType

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """Operator account allowed to use the API"""

    __tablename__ = "app_user"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(160), nullable=False, unique=True)
    name = Column(Text, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class Customer(Base):
    """Borrower identified by a unique phone number"""

    __tablename__ = "customer"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    phone = Column(String(32), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    credits = relationship("Credit", back_populates="customer", order_by="Credit.created_at.desc()")


class Credit(Base):
    """
    Loan or service credit extended to a customer.

    total_cents is fixed at creation; amount_paid_cents only grows through
    recorded payments. Status and balance are derived on read, never stored.
    """

    __tablename__ = "credit"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    customer_id = Column(UUID(as_uuid=True), ForeignKey("customer.id"), nullable=False, index=True)
    type = Column(Enum(CreditType, name="credit_type"), nullable=False)
    principal_cents = Column(BigInteger, nullable=False)
    interest_cents = Column(BigInteger, nullable=True)
    total_cents = Column(BigInteger, nullable=False)
    amount_paid_cents = Column(BigInteger, nullable=False, default=0)
    due_date = Column(Date, nullable=True)
    date_issued = Column(Date, nullable=False)
    repayment_type = Column(Enum(RepaymentType, name="repayment_type"), nullable=False)
    installments = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    customer = relationship("Customer", back_populates="credits")
    payments = relationship("Payment", back_populates="credit", order_by="Payment.created_at")


class Payment(Base):
    """Repayment applied to a credit"""

    __tablename__ = "payment"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    credit_id = Column(UUID(as_uuid=True), ForeignKey("credit.id"), nullable=False, index=True)
    amount_cents = Column(BigInteger, nullable=False)
    date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    credit = relationship("Credit", back_populates="payments")
