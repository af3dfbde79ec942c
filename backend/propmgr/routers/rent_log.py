# backend/propmgr/routers/rent_log.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas import RentLogOut, RentLogUpsert
from ..services.monthly_logs import list_rent_log, upsert_rent_log

# Served under both names; the rent roll screen and older clients use /rentroll.
router = APIRouter(tags=["rent_log"])


@router.get("/rentlog", response_model=list[RentLogOut])
@router.get("/rentroll", response_model=list[RentLogOut])
def get_rent_log(
    property_id: int = Query(..., gt=0),
    year: Optional[int] = Query(default=None, gt=0, le=9999),
    db: Session = Depends(get_db),
):
    return list_rent_log(db, property_id=property_id, year=year)


@router.post("/rentlog", response_model=RentLogOut)
@router.post("/rentroll", response_model=RentLogOut)
def save_rent_log(payload: RentLogUpsert, db: Session = Depends(get_db)):
    return upsert_rent_log(db, payload)
