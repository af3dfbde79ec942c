from __future__ import annotations

from datetime import date

from sqlalchemy import func, select

from propmgr.db import SessionLocal
from propmgr.models import RentLog
from propmgr.schemas import RentLogUpsert
from propmgr.services import natural_key
from propmgr.services.monthly_logs import upsert_rent_log


def _rows(db, pid):
    return db.scalar(select(func.count()).select_from(RentLog).where(RentLog.property_id == pid))


def test_second_post_for_same_month_updates_in_place(client, db, make_property):
    pid = make_property()["property_id"]
    body = {"property_id": pid, "month": "Jan", "year": 2024, "rent_amount": 1000}

    first = client.post("/api/rentlog", json=body).json()
    second = client.post("/api/rentlog", json={**body, "rent_amount": 1200}).json()

    assert first["rent_id"] == second["rent_id"]
    assert second["rent_amount"] == 1200
    assert _rows(db, pid) == 1


def test_repeating_the_same_post_is_idempotent(client, db, make_property):
    pid = make_property()["property_id"]
    body = {"property_id": pid, "month": "Feb", "year": 2024, "rent_amount": 900, "date_deposited": "2024-02-03"}

    a = client.post("/api/rentlog", json=body).json()
    b = client.post("/api/rentlog", json=body).json()
    assert a == b
    assert _rows(db, pid) == 1


def test_missing_key_field_is_400_and_writes_nothing(client, db, make_property):
    pid = make_property()["property_id"]
    r = client.post("/api/rentlog", json={"property_id": pid, "year": 2024, "rent_amount": 5})
    assert r.status_code == 400
    assert "month" in r.json()["error"]
    assert _rows(db, pid) == 0


def test_amount_without_deposit_date_stamps_today(client, make_property):
    pid = make_property()["property_id"]
    client.post(
        "/api/rentlog",
        json={"property_id": pid, "month": "Mar", "year": 2024, "date_deposited": "2024-03-05", "notes": "late"},
    )
    r = client.post("/api/rentlog", json={"property_id": pid, "month": "Mar", "year": 2024, "rent_amount": 1100})
    assert r.json()["date_deposited"] == date.today().isoformat()
    assert r.json()["notes"] == "late"


def test_notes_only_edit_keeps_deposit_date(client, make_property):
    pid = make_property()["property_id"]
    client.post(
        "/api/rentlog",
        json={"property_id": pid, "month": "Apr", "year": 2024, "rent_amount": 1, "date_deposited": "2024-04-02"},
    )
    r = client.post("/api/rentlog", json={"property_id": pid, "month": "Apr", "year": 2024, "notes": "ok"})
    assert r.json()["date_deposited"] == "2024-04-02"
    assert r.json()["rent_amount"] == 1


def test_new_row_defaults(client, make_property):
    pid = make_property()["property_id"]
    r = client.post("/api/rentlog", json={"property_id": pid, "month": "May", "year": 2024})
    assert r.status_code == 200
    assert r.json()["rent_amount"] == 0
    assert r.json()["date_deposited"] == date.today().isoformat()


def test_listing_is_calendar_ordered_and_served_under_both_paths(client, make_property):
    pid = make_property()["property_id"]
    for m in ("Mar", "Jan", "Dec", "Feb"):
        client.post("/api/rentroll", json={"property_id": pid, "month": m, "year": 2024, "rent_amount": 1})
    client.post("/api/rentlog", json={"property_id": pid, "month": "Jan", "year": 2023, "rent_amount": 1})

    rows = client.get("/api/rentlog", params={"property_id": pid, "year": 2024}).json()
    assert [r["month"] for r in rows] == ["Jan", "Feb", "Mar", "Dec"]

    all_years = client.get("/api/rentroll", params={"property_id": pid}).json()
    assert [(r["year"], r["month"]) for r in all_years][:2] == [(2023, "Jan"), (2024, "Jan")]


def test_list_requires_property_id(client):
    assert client.get("/api/rentlog").status_code == 400


def test_unknown_property_is_rejected(client):
    r = client.post("/api/rentlog", json={"property_id": 9999, "month": "Jan", "year": 2024, "rent_amount": 1})
    assert r.status_code == 400


def test_insert_race_merges_into_winning_row(db, make_property, monkeypatch):
    pid = make_property()["property_id"]

    other = SessionLocal()
    try:
        other.add(RentLog(property_id=pid, month="Jun", year=2024, rent_amount=500, date_deposited=date(2024, 6, 1)))
        other.commit()
    finally:
        other.close()

    real_find = natural_key.find_by_natural_key
    calls = {"n": 0}

    def stale_find(session, model, key):
        calls["n"] += 1
        # first lookup ran before the competing insert landed
        return None if calls["n"] == 1 else real_find(session, model, key)

    monkeypatch.setattr(natural_key, "find_by_natural_key", stale_find)

    row = upsert_rent_log(db, RentLogUpsert(property_id=pid, month="Jun", year=2024, rent_amount=750))
    assert row.rent_amount == 750
    assert _rows(db, pid) == 1
