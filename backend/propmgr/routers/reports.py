# backend/propmgr/routers/reports.py
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_db
from ..domain.reports import Report, property_expenses, property_income
from ..models import Property, RentLog, Transaction
from ..schemas import ExpenseReportOut, IncomeReportOut

router = APIRouter(prefix="/reports", tags=["reports"])


def _parse_ids(raw: Optional[str]) -> list[int]:
    out: list[int] = []
    for part in (raw or "").split(","):
        part = part.strip()
        if part.isdigit():
            out.append(int(part))
    return out


def _selected_properties(db: Session, property_ids: Optional[str]) -> list[Property]:
    q = select(Property).order_by(Property.property_id.asc())
    ids = _parse_ids(property_ids)
    if ids:
        q = q.where(Property.property_id.in_(ids))
    return list(db.scalars(q).all())


def _as_out(report: Report) -> dict:
    return {
        "year": report.year,
        "properties": [
            {
                "property_id": p.property_id,
                "property_name": p.property_name,
                "rows": [r.__dict__ for r in p.rows],
                "total": p.total,
            }
            for p in report.properties
        ],
        "grand_total": report.grand_total,
    }


@router.get("/income", response_model=IncomeReportOut)
def income_report(
    year: int = Query(..., gt=0, le=9999),
    property_ids: Optional[str] = Query(default=None, description="comma separated; all properties when omitted"),
    db: Session = Depends(get_db),
):
    report = Report(year=year)
    for p in _selected_properties(db, property_ids):
        rows = db.scalars(select(RentLog).where(RentLog.property_id == p.property_id, RentLog.year == year)).all()
        report.properties.append(property_income(p.property_id, p.property_name, rows))
    return _as_out(report)


@router.get("/expenses", response_model=ExpenseReportOut)
def expense_report(
    year: int = Query(..., gt=0, le=9999),
    property_ids: Optional[str] = Query(default=None, description="comma separated; all properties when omitted"),
    db: Session = Depends(get_db),
):
    report = Report(year=year)
    for p in _selected_properties(db, property_ids):
        txns = db.scalars(
            select(Transaction).where(
                Transaction.property_id == p.property_id,
                Transaction.transaction_date >= date(year, 1, 1),
                Transaction.transaction_date <= date(year, 12, 31),
            )
        ).all()
        report.properties.append(property_expenses(p.property_id, p.property_name, txns, year))
    return _as_out(report)
