# backend/propmgr/services/property_delete.py
from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..models import LoanDetails, PaymentLog, Property, PurchaseDetails, RentLog, Tenant, Transaction

log = logging.getLogger("propmgr.property_delete")

# Children before the parent. LoanDetails references PurchaseDetails, so it
# goes first; the rest share no keys with each other.
DEPENDENT_MODELS = (LoanDetails, PurchaseDetails, RentLog, PaymentLog, Transaction, Tenant)


def delete_property_cascade(db: Session, *, property_id: int) -> dict[str, int]:
    """
    Remove a property and every row that references it, all-or-nothing.

    Raises sqlalchemy.exc.NoResultFound when the property does not exist (the
    lookup happens before any delete, so nothing is touched). Any other
    failure rolls the whole transaction back and propagates.

    Returns per-table deleted row counts.
    """
    counts: dict[str, int] = {}
    try:
        prop = db.execute(
            select(Property).where(Property.property_id == property_id).with_for_update()
        ).scalar_one()

        for model in DEPENDENT_MODELS:
            res = db.execute(delete(model).where(model.property_id == property_id))
            counts[model.__tablename__] = int(res.rowcount or 0)

        db.execute(delete(Property).where(Property.property_id == prop.property_id))
        counts[Property.__tablename__] = 1
        db.commit()
    except Exception:
        db.rollback()
        raise

    log.info("property deleted", extra={"property_id": property_id})
    return counts
