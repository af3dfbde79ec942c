from __future__ import annotations

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import NoResultFound, OperationalError

from propmgr.models import LoanDetails, PaymentLog, Property, PurchaseDetails, RentLog, Tenant, Transaction
from propmgr.services.property_delete import DEPENDENT_MODELS, delete_property_cascade


def _populate(client, pid: int) -> None:
    purchase = client.post("/api/purchase_details", json={"property_id": pid, "purchase_price": 100000}).json()
    r = client.post(
        "/api/loan_details",
        json={"loan_id": f"L-{pid}", "property_id": pid, "purchase_id": purchase["purchase_id"], "loan_amount": 80000},
    )
    assert r.status_code == 201, r.text
    assert client.post("/api/rentlog", json={"property_id": pid, "month": "Jan", "year": 2024, "rent_amount": 1000}).status_code == 200
    assert client.post("/api/paymentlog", json={"property_id": pid, "month": "Jan", "year": 2024, "payment_amount": 500}).status_code == 200
    assert client.post("/api/transactions", json={"property_id": pid, "amount": 250, "date": "2024-03-01"}).status_code == 201
    assert client.post("/api/tenant", json={"property_id": pid, "tenant_name": "Sam", "lease_start": "2024-01-01"}).status_code == 201


def _count(db, model, pid: int) -> int:
    return db.scalar(select(func.count()).select_from(model).where(model.property_id == pid))


def test_delete_removes_property_and_every_dependent_row(client, db, make_property):
    keep = make_property()
    gone = make_property()
    _populate(client, keep["property_id"])
    _populate(client, gone["property_id"])

    r = client.delete(f"/api/properties/{gone['property_id']}")
    assert r.status_code == 204
    assert r.content == b""

    for model in DEPENDENT_MODELS:
        assert _count(db, model, gone["property_id"]) == 0, model.__tablename__
        assert _count(db, model, keep["property_id"]) == 1, model.__tablename__
    assert client.get(f"/api/properties/{gone['property_id']}").status_code == 404


def test_delete_missing_property_is_404_without_side_effects(client, db, make_property):
    p = make_property()
    _populate(client, p["property_id"])

    r = client.delete("/api/properties/424242")
    assert r.status_code == 404
    assert r.json() == {"message": "Property not found"}
    assert _count(db, Transaction, p["property_id"]) == 1


def test_service_raises_no_result_for_unknown_id(db):
    with pytest.raises(NoResultFound):
        delete_property_cascade(db, property_id=31337)


def test_failure_mid_cascade_rolls_everything_back(client, db, make_property, monkeypatch):
    p = make_property()
    pid = p["property_id"]
    _populate(client, pid)

    real_execute = db.execute
    calls = {"n": 0}

    def flaky_execute(stmt, *args, **kwargs):
        calls["n"] += 1
        # select, loan delete, purchase delete, then the rent log delete fails
        if calls["n"] == 4:
            raise OperationalError("DELETE FROM rent_log", {}, Exception("disk I/O error"))
        return real_execute(stmt, *args, **kwargs)

    monkeypatch.setattr(db, "execute", flaky_execute)
    with pytest.raises(OperationalError):
        delete_property_cascade(db, property_id=pid)
    monkeypatch.undo()

    db.expire_all()
    assert db.get(Property, pid) is not None
    for model in (LoanDetails, PurchaseDetails, RentLog, PaymentLog, Transaction, Tenant):
        assert _count(db, model, pid) == 1, model.__tablename__


def test_unexpected_failure_maps_to_500_with_details(client, make_property, monkeypatch):
    p = make_property()

    def boom(db, *, property_id):
        raise RuntimeError("lock timeout")

    monkeypatch.setattr("propmgr.routers.properties.delete_property_cascade", boom)
    r = client.delete(f"/api/properties/{p['property_id']}")
    assert r.status_code == 500
    assert r.json() == {"message": "Delete failed", "details": "lock timeout"}
