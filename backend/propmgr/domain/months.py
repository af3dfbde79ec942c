# backend/propmgr/domain/months.py
from __future__ import annotations

from typing import Optional

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def month_index(label: object) -> Optional[int]:
    """
    1-based month number for a rent/payment log month label.

    Labels are stored as the UI writes them ("Jan", "jan"); full names and
    numeric labels ("January", "1", "01") are accepted too.
    """
    s = str(label or "").strip()
    if not s:
        return None
    if s.isdigit():
        n = int(s)
        return n if 1 <= n <= 12 else None
    key = s[:3].lower()
    for i, m in enumerate(MONTHS):
        if m.lower() == key:
            return i + 1
    return None


def sort_key(label: object) -> int:
    idx = month_index(label)
    return idx if idx is not None else 13
