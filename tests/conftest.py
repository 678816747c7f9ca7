"""Pytest fixtures for testing"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from datetime import date
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from credit_manager.api.main import create_app
from credit_manager.api.dependencies import get_current_user, get_today
from credit_manager.infrastructure.database.models import Base, User
from credit_manager.infrastructure.database.session import get_db
from credit_manager.domain.models import CreditSnapshot, CreditType, PaymentRecord, RepaymentType


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed evaluation date so derived statuses are deterministic
TODAY = date(2024, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def operator(db: Session) -> User:
    user = User(email="operator@example.com", name="Operator", password_hash="not-used")
    db.add(user)
    db.commit()
    return user


def _build_client(db: Session, current_user: User | None = None) -> TestClient:
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    if current_user is not None:
        app.dependency_overrides[get_current_user] = lambda: current_user
    return TestClient(app)


@pytest.fixture
def client(db: Session, operator: User) -> TestClient:
    """Create FastAPI test client with test database and an authenticated operator"""
    return _build_client(db, current_user=operator)


@pytest.fixture
def anonymous_client(db: Session) -> TestClient:
    """Test client that goes through real bearer-token authentication"""
    return _build_client(db)


@pytest.fixture
def create_customer(client: TestClient) -> Callable[..., dict]:
    """Create a customer through the API and return its JSON"""
    counter = {"n": 0}

    def _create(name: str = "Jane Doe", phone: str | None = None) -> dict:
        counter["n"] += 1
        response = client.post(
            "/api/customers",
            json={"name": name, "phone": phone or f"+25670000{counter['n']:04d}"},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_credit(client: TestClient) -> Callable[..., dict]:
    """Issue a credit through the API and return its JSON"""

    def _create(customer_id: str, **overrides) -> dict:
        body = {
            "customerId": customer_id,
            "type": "CASH_LOAN",
            "principalAmount": 10000,
            "dateIssued": "2024-06-01",
            "repaymentType": "FLEXIBLE",
        }
        body.update(overrides)
        response = client.post("/api/credits", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


def make_credit(
    total_cents: int = 1_000_000,
    paid_cents: int = 0,
    due_date: date | None = None,
    date_issued: date | None = date(2024, 1, 15),
    repayment_type: RepaymentType = RepaymentType.FLEXIBLE,
    installments: int | None = None,
    payments: list[PaymentRecord] | None = None,
) -> CreditSnapshot:
    """Build a credit snapshot for domain-level tests"""
    return CreditSnapshot(
        id="credit-1",
        customer_id="customer-1",
        type=CreditType.CASH_LOAN,
        principal_cents=total_cents,
        interest_cents=None,
        total_cents=total_cents,
        paid_cents=paid_cents,
        due_date=due_date,
        date_issued=date_issued,
        repayment_type=repayment_type,
        installments=installments,
        payments=payments or [],
    )


def make_payment(payment_id: str, amount_cents: int, paid_on: date) -> PaymentRecord:
    return PaymentRecord(id=payment_id, credit_id="credit-1", amount_cents=amount_cents, date=paid_on)
