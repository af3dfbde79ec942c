from __future__ import annotations


def test_tenant_upsert_on_property_name_lease_start(client, make_property):
    pid = make_property()["property_id"]
    body = {"property_id": pid, "tenant_name": "Sam Renter", "lease_start": "2024-01-01", "rent_amount": 1400}

    first = client.post("/api/tenant", json=body)
    assert first.status_code == 201
    assert first.json()["tenant_status"] == "Inactive"

    second = client.post("/api/tenant", json={**body, "tenant_status": "Active", "rent_amount": 1450})
    assert second.status_code == 201
    assert second.json()["tenant_id"] == first.json()["tenant_id"]
    assert second.json()["tenant_status"] == "Active"
    assert second.json()["rent_amount"] == 1450

    client.post("/api/tenant", json={**body, "lease_start": "2025-01-01"})
    rows = client.get("/api/tenant", params={"property_id": pid}).json()
    assert [r["lease_start"] for r in rows] == ["2024-01-01", "2025-01-01"]


def test_tenant_list_requires_property_id(client):
    assert client.get("/api/tenant").status_code == 400


def test_tenant_patch_and_delete(client, make_property):
    pid = make_property()["property_id"]
    t = client.post("/api/tenant", json={"property_id": pid, "tenant_name": "Pat", "lease_start": "2024-02-01"}).json()

    r = client.patch(f"/api/tenant/{t['tenant_id']}", json={"lease_end": "2025-01-31"})
    assert r.json()["lease_end"] == "2025-01-31"
    assert r.json()["tenant_name"] == "Pat"

    assert client.delete(f"/api/tenant/{t['tenant_id']}").status_code == 204
    assert client.get("/api/tenant", params={"property_id": pid}).json() == []
    assert client.patch(f"/api/tenant/{t['tenant_id']}", json={"rent_amount": 1}).status_code == 404


def test_tenant_upsert_requires_name_and_lease_start(client, make_property):
    pid = make_property()["property_id"]
    r1 = client.post("/api/tenant", json={"property_id": pid, "rent_amount": 1000})
    r2 = client.post("/api/tenant", json={"property_id": pid, "tenant_name": "Lee", "lease_start": "", "rent_amount": 1200})
    assert r1.status_code == 400
    assert r2.status_code == 400
    assert "lease_start" in r2.json()["error"]
    assert client.get("/api/tenant", params={"property_id": pid}).json() == []


def test_patch_ignores_explicit_null(client, make_property):
    pid = make_property()["property_id"]
    t = client.post(
        "/api/tenant",
        json={"property_id": pid, "tenant_name": "Kim", "lease_start": "2024-01-01", "lease_end": "2024-12-31"},
    ).json()
    r = client.patch(f"/api/tenant/{t['tenant_id']}", json={"lease_end": None})
    assert r.json()["lease_end"] == "2024-12-31"
