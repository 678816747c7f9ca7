"""Integration tests for /api/payments"""

from unittest.mock import patch
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from credit_manager.infrastructure.database.models import Credit, Payment


def test_record_payment_updates_credit(client: TestClient, create_customer, create_credit):
    credit = create_credit(create_customer()["id"], principalAmount=20000)

    response = client.post(
        "/api/payments",
        json={"creditId": credit["id"], "amount": 5000, "date": "2024-06-10"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["payment"]["amount"] == 5000
    assert data["payment"]["date"] == "2024-06-10"
    assert data["credit"]["amountPaid"] == 5000
    assert data["credit"]["outstandingBalance"] == 15000
    assert data["credit"]["paymentHistory"][0]["balanceAfterPayment"] == 15000


def test_payment_date_defaults_to_today(client: TestClient, create_customer, create_credit, today):
    credit = create_credit(create_customer()["id"])

    response = client.post("/api/payments", json={"creditId": credit["id"], "amount": 100})

    assert response.json()["payment"]["date"] == today.isoformat()


def test_overpayment_is_accepted_and_surfaced(client: TestClient, create_customer, create_credit):
    credit = create_credit(create_customer()["id"], principalAmount=1000)

    response = client.post("/api/payments", json={"creditId": credit["id"], "amount": 1200})

    assert response.status_code == 201
    data = response.json()["credit"]
    assert data["status"] == "COMPLETED"
    assert data["outstandingBalance"] == -200
    assert data["paymentHistory"][0]["balanceAfterPayment"] == -200


def test_payment_validation(client: TestClient, create_customer, create_credit):
    credit = create_credit(create_customer()["id"])

    assert client.post("/api/payments", json={"creditId": credit["id"], "amount": 0}).status_code == 422
    assert client.post("/api/payments", json={"creditId": credit["id"], "amount": -5}).status_code == 422


def test_payment_unknown_credit(client: TestClient):
    response = client.post(
        "/api/payments",
        json={"creditId": "00000000-0000-0000-0000-000000000000", "amount": 100},
    )
    assert response.status_code == 404


def test_failed_payment_write_leaves_balance_untouched(
    client: TestClient, db: Session, create_customer, create_credit
):
    """Payment row and balance increment commit together or not at all"""
    credit = create_credit(create_customer()["id"], principalAmount=1000)

    with patch.object(db, "commit", side_effect=RuntimeError("disk full")):
        response = client.post("/api/payments", json={"creditId": credit["id"], "amount": 400})

    assert response.status_code == 500
    assert db.query(Payment).count() == 0
    stored = db.query(Credit).one()
    assert stored.amount_paid_cents == 0


def test_list_payments_newest_first(client: TestClient, create_customer, create_credit):
    credit = create_credit(create_customer()["id"], principalAmount=10000)
    for amount, paid_on in [(100, "2024-06-03"), (200, "2024-06-01"), (300, "2024-06-07")]:
        client.post("/api/payments", json={"creditId": credit["id"], "amount": amount, "date": paid_on})

    response = client.get(f"/api/payments/credit/{credit['id']}")

    assert response.status_code == 200
    assert [p["amount"] for p in response.json()] == [300, 100, 200]


def test_list_payments_unknown_credit(client: TestClient):
    assert client.get("/api/payments/credit/00000000-0000-0000-0000-000000000000").status_code == 404
