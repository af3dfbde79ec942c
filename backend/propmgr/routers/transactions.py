# backend/propmgr/routers/transactions.py
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Transaction
from ..schemas import TransactionCreate, TransactionOut, TransactionUpdate
from ..services.ownership import must_get_transaction

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=list[TransactionOut])
def list_transactions(
    property_id: int = Query(..., gt=0),
    year: Optional[int] = Query(default=None, gt=0, le=9999),
    db: Session = Depends(get_db),
):
    q = select(Transaction).where(Transaction.property_id == property_id)
    if year is not None:
        q = q.where(
            Transaction.transaction_date >= date(year, 1, 1),
            Transaction.transaction_date <= date(year, 12, 31),
        )
    q = q.order_by(Transaction.transaction_date.desc(), Transaction.transaction_id.desc())
    return list(db.scalars(q).all())


@router.post("", response_model=TransactionOut, status_code=201)
def create_transaction(payload: TransactionCreate, db: Session = Depends(get_db)):
    row = Transaction(
        property_id=payload.property_id,
        transaction_type=payload.transaction_type,
        notes=payload.notes,
        transaction_amount=payload.amount,
        transaction_date=payload.date,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


@router.patch("/{transaction_id}", response_model=TransactionOut)
def update_transaction(transaction_id: int, payload: TransactionUpdate, db: Session = Depends(get_db)):
    row = must_get_transaction(db, transaction_id=transaction_id)
    data = payload.model_dump(exclude_unset=True)
    for k in ("transaction_amount", "transaction_date"):
        if k in data and data[k] is None:
            raise HTTPException(status_code=400, detail=f"{k} cannot be null")
    for k, v in data.items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row


@router.delete("/{transaction_id}", status_code=204, response_class=Response)
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    row = must_get_transaction(db, transaction_id=transaction_id)
    db.delete(row)
    db.commit()
    return Response(status_code=204)
