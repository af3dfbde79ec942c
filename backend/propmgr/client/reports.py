# backend/propmgr/client/reports.py
from __future__ import annotations

import csv
import io
import logging
from typing import Iterable, Optional, TextIO

from ..domain.reports import Report, property_expenses, property_income, report_to_csv_rows
from .api_client import PropertyManagerClient

log = logging.getLogger("propmgr.client.reports")


def _names(api: PropertyManagerClient, property_ids: Optional[Iterable[int]]) -> list[tuple[int, str]]:
    props = api.list_properties()
    wanted = set(int(x) for x in property_ids) if property_ids else None
    return [
        (int(p["property_id"]), str(p.get("property_name") or ""))
        for p in props
        if wanted is None or int(p["property_id"]) in wanted
    ]


def income_report(api: PropertyManagerClient, year: int, property_ids: Optional[Iterable[int]] = None) -> Report:
    """
    Re-fetches the rent log for every selected property for `year` and sums
    it per calendar month. Nothing is cached between calls.
    """
    report = Report(year=year)
    for pid, name in _names(api, property_ids):
        rows = api.list_rent_log(pid, year)
        report.properties.append(property_income(pid, name, rows))
    return report


def expense_report(api: PropertyManagerClient, year: int, property_ids: Optional[Iterable[int]] = None) -> Report:
    report = Report(year=year)
    for pid, name in _names(api, property_ids):
        txns = api.list_transactions(pid, year)
        report.properties.append(property_expenses(pid, name, txns, year))
    return report


def write_csv(report: Report, out: TextIO) -> int:
    rows = report_to_csv_rows(report)
    csv.writer(out).writerows(rows)
    log.info("exported %d report rows for %s", len(rows), report.year)
    return len(rows)


def to_csv(report: Report) -> str:
    buf = io.StringIO()
    write_csv(report, buf)
    return buf.getvalue()
