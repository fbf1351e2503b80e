from shopbudget.models import Shop, Item
from conftest import add_shop, add_item, get_day


def test_create_shop_returns_id(client):
    r = client.post("/shop", json={"date": "2024-06-01", "name": "  Supermarket  "})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert isinstance(body["id"], int)
    assert get_day(client, "2024-06-01")["shops"][0]["name"] == "Supermarket"


def test_create_shop_requires_date_and_name(client):
    for body in ({"date": "2024-06-01"}, {"name": "Shop"}, {"date": "2024-06-01", "name": "   "}):
        r = client.post("/shop", json=body)
        assert r.status_code == 400
        assert r.json() == {"ok": False, "error": "date and name required"}


def test_create_shop_rejects_malformed_date(client):
    r = client.post("/shop", json={"date": "June 1st", "name": "Shop"})
    assert r.status_code == 400
    assert r.json()["error"] == "invalid date: June 1st"


def test_item_without_price_defaults_to_zero(client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")
    add_item(client, shop_id, "Gum")

    item = get_day(client, "2024-06-01")["shops"][0]["items"][0]
    assert item["planned_price"] == 0
    assert item["actual_price"] == 0
    assert item["is_bought"] is False


def test_item_actual_price_starts_at_planned(db, client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")
    item_id = add_item(client, shop_id, "Coffee", 150)

    item = db.query(Item).filter(Item.id == item_id).first()
    assert item.planned_price == 150
    assert item.actual_price == 150
    assert item.is_bought is False


def test_create_item_validation(client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")

    r = client.post("/item", json={"name": "Gum"})
    assert r.status_code == 400
    assert r.json()["error"] == "shop_id and name required"

    r = client.post("/item", json={"shop_id": shop_id, "name": " "})
    assert r.status_code == 400

    r = client.post("/item", json={"shop_id": 9999, "name": "Gum"})
    assert r.status_code == 400
    assert r.json()["error"] == "shop 9999 not found"

    r = client.post("/item", json={"shop_id": shop_id, "name": "Gum", "planned_price": -5})
    assert r.status_code == 400


def test_set_actual_price(client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")
    item_id = add_item(client, shop_id, "Coffee", 150)

    r = client.post(f"/item/{item_id}/actual", json={"actual_price": "180"})
    assert r.json() == {"ok": True}
    item = get_day(client, "2024-06-01")["shops"][0]["items"][0]
    assert item["actual_price"] == 180
    assert item["planned_price"] == 150
    assert item["is_bought"] is False


def test_set_actual_price_coerces_invalid_to_zero(client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")
    item_id = add_item(client, shop_id, "Coffee", 150)

    client.post(f"/item/{item_id}/actual", json={"actual_price": "abc"})
    assert get_day(client, "2024-06-01")["shops"][0]["items"][0]["actual_price"] == 0

    client.post(f"/item/{item_id}/actual", json={"actual_price": 90})
    client.post(f"/item/{item_id}/actual", json={})
    assert get_day(client, "2024-06-01")["shops"][0]["items"][0]["actual_price"] == 0


def test_toggle_back_and_forth(client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")
    item_id = add_item(client, shop_id, "Coffee", 150)

    assert client.post(f"/item/{item_id}/toggle", json={"is_bought": True}).json() == {"ok": True}
    assert get_day(client, "2024-06-01")["shops"][0]["items"][0]["is_bought"] is True

    client.post(f"/item/{item_id}/toggle", json={"is_bought": False})
    assert get_day(client, "2024-06-01")["shops"][0]["items"][0]["is_bought"] is False


def test_toggle_rejects_non_boolean(client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")
    item_id = add_item(client, shop_id, "Coffee", 150)

    r = client.post(f"/item/{item_id}/toggle", json={"is_bought": "maybe"})
    assert r.status_code == 400
    assert r.json()["ok"] is False


def test_mutating_unknown_item(client):
    r = client.post("/item/4242/toggle", json={"is_bought": True})
    assert r.status_code == 404
    assert r.json() == {"ok": False, "error": "item 4242 not found"}

    assert client.post("/item/4242/actual", json={"actual_price": 1}).status_code == 404
    assert client.delete("/item/4242").status_code == 404
    assert client.delete("/shop/4242").json()["error"] == "shop 4242 not found"


def test_unparsable_body(client):
    r = client.post("/shop", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["ok"] is False


def test_delete_item(client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")
    keep = add_item(client, shop_id, "Coffee", 150)
    drop = add_item(client, shop_id, "Tea", 120)

    assert client.delete(f"/item/{drop}").json() == {"ok": True}
    items = get_day(client, "2024-06-01")["shops"][0]["items"]
    assert [it["id"] for it in items] == [keep]


def test_delete_shop_cascades_to_items(db, client):
    shop_id = add_shop(client, "2024-06-01", "Kiosk")
    add_item(client, shop_id, "Coffee", 150)
    add_item(client, shop_id, "Tea", 120)
    other = add_shop(client, "2024-06-01", "Bakery")
    add_item(client, other, "Bread", 250)

    assert client.delete(f"/shop/{shop_id}").json() == {"ok": True}

    assert db.query(Shop).count() == 1
    assert db.query(Item).filter(Item.shop_id == shop_id).count() == 0
    assert get_day(client, "2024-06-01")["totals"]["day_planned"] == 250


def test_out_of_range_shop_id_is_a_validation_error(client):
    for shop_id in (1e20, -3, 2**63):
        r = client.post("/item", json={"shop_id": shop_id, "name": "Gum"})
        assert r.status_code == 400
        assert r.json() == {"ok": False, "error": "shop_id and name required"}
