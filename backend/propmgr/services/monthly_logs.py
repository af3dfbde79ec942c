# backend/propmgr/services/monthly_logs.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..domain.months import sort_key
from ..models import PaymentLog, RentLog
from ..schemas import PaymentLogUpsert, RentLogUpsert
from .natural_key import upsert_by_natural_key


def _key(payload: RentLogUpsert | PaymentLogUpsert) -> dict:
    return {"property_id": int(payload.property_id), "month": str(payload.month), "year": int(payload.year)}


def upsert_rent_log(db: Session, payload: RentLogUpsert, *, today: Optional[date] = None) -> RentLog:
    """
    Rent roll cell save. Entering an amount or a check number without a
    deposit date stamps today's date as the deposit date.
    """
    today = today or date.today()
    sent = payload.model_fields_set

    update = {
        "rent_amount": payload.rent_amount,
        "check_number": payload.check_number,
        "notes": payload.notes,
    }
    if payload.date_deposited:
        update["date_deposited"] = payload.date_deposited
    elif "rent_amount" in sent or "check_number" in sent:
        update["date_deposited"] = today

    create = {
        "rent_amount": payload.rent_amount if payload.rent_amount is not None else 0.0,
        "date_deposited": payload.date_deposited or today,
        "check_number": payload.check_number,
        "notes": payload.notes,
    }
    return upsert_by_natural_key(db, RentLog, key=_key(payload), create=create, update=update)


def upsert_payment_log(db: Session, payload: PaymentLogUpsert, *, today: Optional[date] = None) -> PaymentLog:
    """Same stamping rule as the rent log, applied to date_paid."""
    today = today or date.today()
    sent = payload.model_fields_set
    stamp = "payment_amount" in sent or "check_number" in sent

    update = {
        "payment_amount": payload.payment_amount,
        "check_number": payload.check_number,
        "notes": payload.notes,
    }
    if payload.date_paid:
        update["date_paid"] = payload.date_paid
    elif stamp:
        update["date_paid"] = today

    create = {
        "payment_amount": payload.payment_amount if payload.payment_amount is not None else 0.0,
        "check_number": payload.check_number,
        "notes": payload.notes,
        "date_paid": payload.date_paid or (today if stamp else None),
    }
    return upsert_by_natural_key(db, PaymentLog, key=_key(payload), create=create, update=update)


def list_rent_log(db: Session, *, property_id: int, year: Optional[int] = None) -> list[RentLog]:
    q = select(RentLog).where(RentLog.property_id == property_id)
    if year is not None:
        q = q.where(RentLog.year == year)
    rows = list(db.scalars(q).all())
    # calendar order, not alphabetical ("Apr" < "Aug" < "Dec")
    rows.sort(key=lambda r: (r.year, sort_key(r.month)))
    return rows


def list_payment_log(db: Session, *, property_id: int, year: int) -> list[PaymentLog]:
    q = select(PaymentLog).where(PaymentLog.property_id == property_id, PaymentLog.year == year)
    rows = list(db.scalars(q).all())
    rows.sort(key=lambda r: (r.year, sort_key(r.month)))
    return rows
