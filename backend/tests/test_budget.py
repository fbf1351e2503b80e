from shopbudget.models import Budget
from conftest import get_day


def test_budget_defaults_to_zero(client):
    r = client.get("/budget", params={"ym": "2024-06"})
    assert r.status_code == 200
    assert r.json() == {"ym": "2024-06", "amount": 0}


def test_budget_upsert_keeps_single_row(db, client):
    assert client.post("/budget", json={"ym": "2024-06", "amount": 30000}).json() == {"ok": True}
    assert client.post("/budget", json={"ym": "2024-06", "amount": 45000}).json() == {"ok": True}

    assert client.get("/budget", params={"ym": "2024-06"}).json()["amount"] == 45000
    assert db.query(Budget).filter(Budget.ym == "2024-06").count() == 1


def test_budget_is_per_month(client):
    client.post("/budget", json={"ym": "2024-06", "amount": 30000})
    client.post("/budget", json={"ym": "2024-07", "amount": 10000})

    assert get_day(client, "2024-06-20")["budget"] == {"ym": "2024-06", "amount": 30000}
    assert get_day(client, "2024-07-01")["budget"] == {"ym": "2024-07", "amount": 10000}
    assert get_day(client, "2024-08-01")["budget"]["amount"] == 0


def test_budget_validation(client):
    r = client.post("/budget", json={"ym": "2024-6", "amount": 100})
    assert r.status_code == 400
    assert r.json() == {"ok": False, "error": "invalid ym: 2024-6"}

    assert client.post("/budget", json={"amount": 100}).status_code == 400
    assert client.post("/budget", json={"ym": "2024-06", "amount": -1}).status_code == 400
    assert client.get("/budget", params={"ym": "June"}).status_code == 400
