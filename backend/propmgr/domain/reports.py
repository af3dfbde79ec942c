# backend/propmgr/domain/reports.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Optional

from .months import MONTHS, month_index


def _get(row: Any, name: str) -> Any:
    # ORM rows on the server, JSON dicts in the client
    if isinstance(row, dict):
        return row.get(name)
    return getattr(row, name, None)


def _as_amount(v: Any) -> Optional[float]:
    if v is None or v == "":
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    if f != f or f in (float("inf"), float("-inf")):
        return None
    return f


def _iso_day(v: Any) -> str:
    if isinstance(v, datetime):
        return v.date().isoformat()
    if isinstance(v, date):
        return v.isoformat()
    return str(v or "")[:10]


@dataclass(frozen=True)
class MonthAmount:
    month: int
    amount: Optional[float]


@dataclass(frozen=True)
class ExpenseRow:
    type: str
    amount: Optional[float]
    date: str


@dataclass(frozen=True)
class PropertyIncome:
    property_id: int
    property_name: str
    rows: list[MonthAmount]
    total: float


@dataclass(frozen=True)
class PropertyExpenses:
    property_id: int
    property_name: str
    rows: list[ExpenseRow]
    total: float


@dataclass
class Report:
    year: int
    properties: list[Any] = field(default_factory=list)

    @property
    def grand_total(self) -> float:
        return round(sum(p.total for p in self.properties), 2)


def rent_by_month(rent_rows: Iterable[Any]) -> list[MonthAmount]:
    """
    Twelve buckets (Jan..Dec) of summed rent. A month with no usable amount
    stays None so the report can show a blank cell instead of 0.
    """
    by_month: dict[int, float] = {}
    for r in rent_rows:
        idx = month_index(_get(r, "month"))
        amt = _as_amount(_get(r, "rent_amount"))
        if idx is None or amt is None:
            continue
        by_month[idx] = by_month.get(idx, 0.0) + amt
    return [MonthAmount(month=m, amount=by_month.get(m)) for m in range(1, 13)]


def expenses_for_year(transactions: Iterable[Any], year: int) -> list[ExpenseRow]:
    out: list[ExpenseRow] = []
    for t in transactions:
        day = _iso_day(_get(t, "transaction_date"))
        if not day[:4].isdigit() or int(day[:4]) != int(year):
            continue
        out.append(
            ExpenseRow(
                type=str(_get(t, "transaction_type") or "").strip(),
                amount=_as_amount(_get(t, "transaction_amount")),
                date=day,
            )
        )
    out.sort(key=lambda r: r.date)
    return out


def property_income(property_id: int, property_name: str, rent_rows: Iterable[Any]) -> PropertyIncome:
    rows = rent_by_month(rent_rows)
    total = round(sum(r.amount or 0.0 for r in rows), 2)
    return PropertyIncome(property_id=property_id, property_name=property_name, rows=rows, total=total)


def property_expenses(
    property_id: int, property_name: str, transactions: Iterable[Any], year: int
) -> PropertyExpenses:
    rows = expenses_for_year(transactions, year)
    total = round(sum(r.amount or 0.0 for r in rows), 2)
    return PropertyExpenses(property_id=property_id, property_name=property_name, rows=rows, total=total)


def report_to_csv_rows(report: Report) -> list[list[str]]:
    """Flat rows for the "Export Report" button: property, label, amount."""
    rows: list[list[str]] = [["property_id", "property_name", "label", "amount"]]
    for p in report.properties:
        for r in p.rows:
            if isinstance(r, MonthAmount):
                label = MONTHS[r.month - 1]
            else:
                label = f"{r.date} {r.type}".strip()
            amount = "" if r.amount is None else f"{r.amount:.2f}"
            rows.append([str(p.property_id), p.property_name, label, amount])
        rows.append([str(p.property_id), p.property_name, "TOTAL", f"{p.total:.2f}"])
    rows.append(["", "", "GRAND TOTAL", f"{report.grand_total:.2f}"])
    return rows
