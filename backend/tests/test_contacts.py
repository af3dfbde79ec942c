from __future__ import annotations

from sqlalchemy import func, select

from propmgr.models import Contact


def _count(db) -> int:
    return db.scalar(select(func.count()).select_from(Contact))


def test_phone_is_stored_as_ten_digits(client, db):
    r = client.post("/api/contacts", json={"name": "  Ann Agent ", "phone": "(555) 123-4567", "email": "ann@x.io"})
    assert r.status_code == 201
    body = r.json()
    assert body["name"] == "Ann Agent"
    assert body["phone"] == "5551234567"
    assert body["contact_type"] == ""
    assert isinstance(body["created_at"], int) and body["created_at"] > 0
    assert db.scalar(select(Contact.contact_phone)) == "5551234567"


def test_extra_digits_are_truncated(client):
    r = client.post("/api/contacts", json={"name": "A", "phone": "1-555-123-4567 ext 9"})
    assert r.json()["phone"] == "1555123456"


def test_short_phone_rejected_and_nothing_written(client, db):
    r = client.post("/api/contacts", json={"name": "Bob", "phone": "555-1234"})
    assert r.status_code == 400
    assert r.json() == {"error": "phone must have 10 digits"}
    assert _count(db) == 0


def test_blank_name_rejected(client, db):
    r = client.post("/api/contacts", json={"name": "   ", "phone": "5551234567"})
    assert r.status_code == 400
    assert r.json() == {"error": "name is required"}
    assert _count(db) == 0


def test_partial_update_validates_only_sent_fields(client):
    c = client.post(
        "/api/contacts", json={"name": "Cat", "phone": 5559876543, "contact_type": "Vendor", "notes": "roof"}
    ).json()
    cid = c["contact_id"]

    r = client.patch(f"/api/contacts/{cid}", json={"notes": ""})
    assert r.status_code == 200
    assert r.json()["notes"] == ""
    assert r.json()["contact_type"] == "Vendor"
    assert r.json()["phone"] == "5559876543"

    r = client.patch(f"/api/contacts/{cid}", json={"phone": "12"})
    assert r.status_code == 400
    assert client.get(f"/api/contacts/{cid}").json()["phone"] == "5559876543"


def test_search_by_text_and_phone_digits(client):
    client.post("/api/contacts", json={"name": "Dana Plumber", "phone": "3135550100", "contact_type": "Vendor"})
    client.post("/api/contacts", json={"name": "Eve", "phone": "2485550199", "email": "EVE@mail.com"})

    assert [c["name"] for c in client.get("/api/contacts", params={"q": "plumb"}).json()] == ["Dana Plumber"]
    assert [c["name"] for c in client.get("/api/contacts", params={"q": "eve@"}).json()] == ["Eve"]
    assert [c["name"] for c in client.get("/api/contacts", params={"q": "(248) 555"}).json()] == ["Eve"]
    assert len(client.get("/api/contacts").json()) == 2


def test_list_newest_first(client):
    a = client.post("/api/contacts", json={"name": "A", "phone": "5550000001"}).json()
    b = client.post("/api/contacts", json={"name": "B", "phone": "5550000002"}).json()
    ids = [c["contact_id"] for c in client.get("/api/contacts").json()]
    assert ids == [b["contact_id"], a["contact_id"]]


def test_delete_then_404(client):
    c = client.post("/api/contacts", json={"name": "Gone", "phone": "5550000003"}).json()
    assert client.delete(f"/api/contacts/{c['contact_id']}").status_code == 204
    assert client.get(f"/api/contacts/{c['contact_id']}").status_code == 404
    assert client.patch(f"/api/contacts/{c['contact_id']}", json={"name": "x"}).status_code == 404


def test_stored_phone_formats_back_for_display(client):
    from propmgr.domain.phone import format_phone

    c = client.post("/api/contacts", json={"name": "Jane Doe", "phone": "(555) 123-4567"}).json()
    fetched = client.get(f"/api/contacts/{c['contact_id']}").json()
    assert fetched["phone"] == "5551234567"
    assert format_phone(fetched["phone"]) == "(555) 123-4567"
