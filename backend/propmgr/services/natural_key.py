# backend/propmgr/services/natural_key.py
from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

log = logging.getLogger("propmgr.natural_key")

T = TypeVar("T")


def _key_clause(model: type, key: Mapping[str, Any]) -> list:
    clauses = []
    for name, value in key.items():
        col = getattr(model, name)
        clauses.append(col.is_(None) if value is None else col == value)
    return clauses


def find_by_natural_key(db: Session, model: type[T], key: Mapping[str, Any]) -> T | None:
    return db.scalar(select(model).where(*_key_clause(model, key)))


def _merge(row: Any, update: Mapping[str, Any]) -> None:
    for k, v in update.items():
        if v is not None:
            setattr(row, k, v)


def upsert_by_natural_key(
    db: Session,
    model: type[T],
    *,
    key: Mapping[str, Any],
    create: Mapping[str, Any],
    update: Mapping[str, Any],
) -> T:
    """
    Insert-or-merge keyed by business columns rather than the surrogate id.

    - no row for `key`: insert `key` + `create`
    - row exists: copy every non-None value of `update` onto it

    The table's unique constraint on the key columns is the real guard; if a
    concurrent request inserts the same key between our select and insert,
    the IntegrityError is absorbed once and the winner's row is merged.
    """
    row = find_by_natural_key(db, model, key)
    if row is not None:
        _merge(row, update)
        db.commit()
        db.refresh(row)
        return row

    row = model(**{**dict(create), **dict(key)})
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        existing = find_by_natural_key(db, model, key)
        if existing is None:
            # not a key race (e.g. missing parent row): let the caller map it
            raise
        log.info("natural key race on %s %s; merging into existing row", model.__tablename__, dict(key))
        _merge(existing, update)
        db.commit()
        row = existing

    db.refresh(row)
    return row
