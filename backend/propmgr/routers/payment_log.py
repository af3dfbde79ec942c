# backend/propmgr/routers/payment_log.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas import PaymentLogOut, PaymentLogUpsert
from ..services.monthly_logs import list_payment_log, upsert_payment_log

router = APIRouter(prefix="/paymentlog", tags=["payment_log"])


@router.get("", response_model=list[PaymentLogOut])
def get_payment_log(
    property_id: int = Query(..., gt=0),
    year: int = Query(..., gt=0, le=9999),
    db: Session = Depends(get_db),
):
    return list_payment_log(db, property_id=property_id, year=year)


@router.post("", response_model=PaymentLogOut)
def save_payment_log(payload: PaymentLogUpsert, db: Session = Depends(get_db)):
    return upsert_payment_log(db, payload)
