from __future__ import annotations

from datetime import date


def test_purchase_not_found_shape(client, make_property):
    pid = make_property()["property_id"]
    r = client.get("/api/purchase_details", params={"property_id": pid})
    assert r.status_code == 200
    assert r.json() == {"error": "not_found"}


def test_purchase_requires_property_id(client):
    assert client.get("/api/purchase_details").status_code == 400


def test_purchase_create_fills_defaults(client, make_property):
    pid = make_property()["property_id"]
    r = client.post("/api/purchase_details", json={"property_id": pid})
    assert r.status_code == 201
    body = r.json()
    assert body["purchase_price"] == 0
    assert body["closing_costs"] == 0
    assert body["buyer"] == ""
    assert body["closing_date"] == date.today().isoformat()

    fetched = client.get("/api/purchase_details", params={"property_id": pid}).json()
    assert fetched["purchase_id"] == body["purchase_id"]


def test_one_purchase_per_property(client, make_property):
    pid = make_property()["property_id"]
    client.post("/api/purchase_details", json={"property_id": pid})
    assert client.post("/api/purchase_details", json={"property_id": pid}).status_code == 400


def test_purchase_patch(client, make_property):
    pid = make_property()["property_id"]
    pur = client.post("/api/purchase_details", json={"property_id": pid, "seller": "Acme"}).json()
    r = client.patch(
        f"/api/purchase_details/{pur['purchase_id']}",
        json={"purchase_price": 150000, "closing_date": "2023-06-15T04:00:00.000Z"},
    )
    assert r.status_code == 200
    assert r.json()["purchase_price"] == 150000
    assert r.json()["closing_date"] == "2023-06-15"
    assert r.json()["seller"] == "Acme"
    assert client.patch("/api/purchase_details/9999", json={"notes": "x"}).status_code == 404


def test_loan_lifecycle(client, make_property):
    pid = make_property()["property_id"]
    assert client.get("/api/loan_details", params={"property_id": pid}).json() == {"error": "not_found"}

    pur = client.post("/api/purchase_details", json={"property_id": pid}).json()
    r = client.post(
        "/api/loan_details",
        json={
            "loan_id": 778899,
            "property_id": pid,
            "purchase_id": pur["purchase_id"],
            "loan_amount": 120000,
            "interest_rate": 6.5,
            "loan_start": "2023-07-01",
        },
    )
    assert r.status_code == 201
    assert r.json()["loan_id"] == "778899"

    got = client.get("/api/loan_details", params={"property_id": pid}).json()
    assert got["loan_id"] == "778899"
    assert got["loan_start"] == "2023-07-01"

    r = client.patch("/api/loan_details/778899", json={"lender": "First Bank"})
    assert r.json()["lender"] == "First Bank"
    assert r.json()["loan_amount"] == 120000

    r = client.patch(
        "/api/loan_details/by_property_purchase",
        json={"property_id": pid, "purchase_id": pur["purchase_id"], "loan_status": "Paid"},
    )
    assert r.status_code == 200
    assert r.json()["loan_status"] == "Paid"
    assert r.json()["lender"] == "First Bank"


def test_loan_requires_loan_number(client, make_property):
    pid = make_property()["property_id"]
    pur = client.post("/api/purchase_details", json={"property_id": pid}).json()
    r = client.post("/api/loan_details", json={"property_id": pid, "purchase_id": pur["purchase_id"]})
    assert r.status_code == 400
    assert "loan_id" in r.json()["error"]


def test_loan_patch_unknown(client):
    assert client.patch("/api/loan_details/nope", json={"lender": "x"}).status_code == 404
    r = client.patch("/api/loan_details/by_property_purchase", json={"property_id": 1, "purchase_id": 1})
    assert r.status_code == 404
