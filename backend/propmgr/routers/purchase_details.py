# backend/propmgr/routers/purchase_details.py
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import PurchaseDetails
from ..schemas import PurchaseDetailsCreate, PurchaseDetailsOut, PurchaseDetailsUpdate
from ..services.ownership import must_get_purchase

router = APIRouter(prefix="/purchase_details", tags=["purchase_details"])


@router.get("")
def get_purchase_details(property_id: int = Query(..., gt=0), db: Session = Depends(get_db)):
    row = db.scalar(select(PurchaseDetails).where(PurchaseDetails.property_id == property_id))
    if not row:
        # the SPA renders an empty form for this, not an error banner
        return {"error": "not_found"}
    return PurchaseDetailsOut.model_validate(row)


@router.post("", response_model=PurchaseDetailsOut, status_code=201)
def create_purchase_details(payload: PurchaseDetailsCreate, db: Session = Depends(get_db)):
    row = PurchaseDetails(
        property_id=payload.property_id,
        purchase_price=payload.purchase_price or 0.0,
        down_payment=payload.down_payment,
        financing_type=payload.financing_type or "",
        acquisition_type=payload.acquisition_type or "",
        buyer=payload.buyer or "",
        seller=payload.seller or "",
        closing_date=payload.closing_date or date.today(),
        closing_costs=payload.closing_costs or 0.0,
        earnest_money=payload.earnest_money,
        notes=payload.notes,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.patch("/{purchase_id}", response_model=PurchaseDetailsOut)
def update_purchase_details(purchase_id: int, payload: PurchaseDetailsUpdate, db: Session = Depends(get_db)):
    row = must_get_purchase(db, purchase_id=purchase_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row
