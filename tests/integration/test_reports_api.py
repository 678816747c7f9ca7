"""Integration tests for /api/dashboard and /api/reports"""

from fastapi.testclient import TestClient


def test_dashboard(client: TestClient, create_customer, create_credit):
    customer_id = create_customer()["id"]
    paid = create_credit(customer_id, principalAmount=1000)
    create_credit(customer_id, principalAmount=2000, dueDate="2024-06-01")
    create_credit(customer_id, principalAmount=500, dueDate="2024-06-15")
    client.post("/api/payments", json={"creditId": paid["id"], "amount": 1000, "date": "2024-06-03"})

    response = client.get("/api/dashboard")

    assert response.status_code == 200
    assert response.json() == {
        "totalMoneyIssued": 3500,
        "totalMoneyCollected": 1000,
        "totalOutstanding": 2500,
        "activeCredits": 2,
        "dueToday": 1,
        "overdueAccounts": 1,
        "thisMonthCollections": 1000,
    }


def test_report_month(client: TestClient, create_customer, create_credit):
    credit = create_credit(create_customer()["id"], principalAmount=5000, dateIssued="2024-06-02")
    client.post("/api/payments", json={"creditId": credit["id"], "amount": 100, "date": "2024-05-20"})
    client.post("/api/payments", json={"creditId": credit["id"], "amount": 250, "date": "2024-06-12"})

    response = client.get("/api/reports", params={"filter": "month"})

    assert response.status_code == 200
    data = response.json()
    assert data["start"] == "2024-06-01"
    assert data["end"] == "2024-06-15"
    assert data["paymentsCount"] == 1
    assert data["totalCollected"] == 250
    assert data["creditsIssuedCount"] == 1
    assert data["totalIssued"] == 5000


def test_report_custom_range(client: TestClient, create_customer, create_credit):
    credit = create_credit(create_customer()["id"], principalAmount=5000)
    client.post("/api/payments", json={"creditId": credit["id"], "amount": 100, "date": "2024-05-20"})

    response = client.get("/api/reports", params={"filter": "custom", "from": "2024-05-01", "to": "2024-05-31"})

    assert response.status_code == 200
    assert response.json()["totalCollected"] == 100


def test_report_bad_period(client: TestClient):
    assert client.get("/api/reports", params={"filter": "custom", "from": "2024-05-01"}).status_code == 400
    assert client.get("/api/reports", params={"filter": "decade"}).status_code == 400
