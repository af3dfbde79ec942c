# backend/propmgr/client/optimistic.py
from __future__ import annotations

import copy
import logging
import time
from typing import Any, Callable, Optional

from ..domain.phone import format_phone, to_digits

log = logging.getLogger("propmgr.client.optimistic")

Row = dict[str, Any]


def _now_ms() -> int:
    return int(time.time() * 1000)


def _message(e: Exception) -> str:
    return getattr(e, "message", None) or str(e) or e.__class__.__name__


class OptimisticList:
    """
    Rows backing one table view, mutated locally first and then confirmed
    by the server.

    - create: a temporary row (id = current epoch ms) appears immediately and
      is swapped for the server row, or removed if the call fails
    - update: the whole list is snapshotted, the cell patched, and the
      snapshot restored verbatim if the call fails
    - remove: the row disappears immediately and comes back on failure

    Every failure sets `error` (the banner) and returns None. Nothing is
    queued or retried.
    """

    def __init__(
        self,
        rows: Optional[list[Row]] = None,
        *,
        id_field: str = "id",
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self.rows: list[Row] = list(rows or [])
        self.id_field = id_field
        self.error: Optional[str] = None
        self._clock = clock

    def _index(self, row_id: Any) -> int:
        for i, r in enumerate(self.rows):
            if r.get(self.id_field) == row_id:
                return i
        return -1

    def get(self, row_id: Any) -> Optional[Row]:
        i = self._index(row_id)
        return self.rows[i] if i >= 0 else None

    def dismiss_error(self) -> None:
        self.error = None

    def create(self, row: Row, send: Callable[[Row], Row]) -> Optional[Row]:
        temp_id = self._clock()
        temp = {**row, self.id_field: temp_id}
        self.rows.append(temp)
        try:
            saved = send(dict(row))
        except Exception as e:
            log.info("optimistic create failed: %s", e)
            i = self._index(temp_id)
            if i >= 0:
                del self.rows[i]
            self.error = f"Create failed: {_message(e)}"
            return None
        i = self._index(temp_id)
        if i >= 0:
            self.rows[i] = saved
        else:
            self.rows.append(saved)
        return saved

    def update(self, row_id: Any, field: str, value: Any, send: Callable[[Any, Row], Row]) -> Optional[Row]:
        i = self._index(row_id)
        if i < 0:
            return None
        snapshot = copy.deepcopy(self.rows)
        self.rows[i] = {**self.rows[i], field: value}
        try:
            saved = send(row_id, {field: value})
        except Exception as e:
            log.info("optimistic update failed: %s", e)
            self.rows = snapshot
            self.error = f"Save failed: {_message(e)}"
            return None
        if isinstance(saved, dict):
            j = self._index(row_id)
            if j >= 0:
                self.rows[j] = {**self.rows[j], **saved}
        return self.get(row_id)

    def remove(self, row_id: Any, send: Callable[[Any], Any]) -> bool:
        i = self._index(row_id)
        if i < 0:
            return False
        removed = self.rows.pop(i)
        try:
            send(row_id)
        except Exception as e:
            log.info("optimistic delete failed: %s", e)
            self.rows.insert(min(i, len(self.rows)), removed)
            self.error = f"Delete failed: {_message(e)}"
            return False
        return True

    def sorted_rows(self, key: str, *, descending: bool = False) -> list[Row]:
        # blanks sort as empty strings; phone compares on digits
        def val(r: Row) -> str:
            v = r.get(key)
            if key == "phone":
                return to_digits(str(v or ""))
            return str(v if v is not None else "").lower()

        return sorted(self.rows, key=val, reverse=descending)

    def filtered_rows(self, query: str, fields: Optional[list[str]] = None) -> list[Row]:
        """Case-insensitive substring match; phones also match in their (555) 123-4567 form."""
        token = (query or "").strip().lower()
        if not token:
            return list(self.rows)

        out: list[Row] = []
        for r in self.rows:
            keys = fields or [k for k in r.keys() if k != self.id_field]
            parts: list[str] = []
            for k in keys:
                v = r.get(k)
                if v is None:
                    continue
                parts.append(str(v))
                if k == "phone":
                    parts.append(format_phone(str(v)))
            if token in " ".join(parts).lower():
                out.append(r)
        return out
