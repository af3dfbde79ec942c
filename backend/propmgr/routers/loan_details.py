# backend/propmgr/routers/loan_details.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import LoanDetails
from ..schemas import LoanDetailsByPurchaseUpdate, LoanDetailsCreate, LoanDetailsOut, LoanDetailsUpdate
from ..services.ownership import must_get_loan

router = APIRouter(prefix="/loan_details", tags=["loan_details"])


@router.get("")
def get_loan_details(property_id: int = Query(..., gt=0), db: Session = Depends(get_db)):
    """Earliest loan on the property (by loan_start), or {"error": "not_found"}."""
    row = db.scalar(
        select(LoanDetails)
        .where(LoanDetails.property_id == property_id)
        .order_by(LoanDetails.loan_start.asc().nulls_last(), LoanDetails.loan_id.asc())
        .limit(1)
    )
    if not row:
        return {"error": "not_found"}
    return LoanDetailsOut.model_validate(row)


@router.post("", response_model=LoanDetailsOut, status_code=201)
def create_loan_details(payload: LoanDetailsCreate, db: Session = Depends(get_db)):
    # Only created once the user has typed a loan number.
    row = LoanDetails(**payload.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.patch("/by_property_purchase", response_model=LoanDetailsOut)
def update_loan_by_property_purchase(payload: LoanDetailsByPurchaseUpdate, db: Session = Depends(get_db)):
    row = db.scalar(
        select(LoanDetails).where(
            LoanDetails.property_id == payload.property_id,
            LoanDetails.purchase_id == payload.purchase_id,
        )
    )
    if not row:
        raise HTTPException(status_code=404, detail="Loan not found")

    for k, v in payload.model_dump(exclude_unset=True, exclude={"property_id", "purchase_id"}).items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row


@router.patch("/{loan_id}", response_model=LoanDetailsOut)
def update_loan(loan_id: str, payload: LoanDetailsUpdate, db: Session = Depends(get_db)):
    row = must_get_loan(db, loan_id=loan_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row
