# backend/propmgr/routers/properties.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import select
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Property
from ..schemas import PropertyCreate, PropertyOut, PropertyUpdate
from ..services.ownership import must_get_property
from ..services.property_delete import delete_property_cascade

router = APIRouter(prefix="/properties", tags=["properties"])

log = logging.getLogger("propmgr.properties")


@router.get("", response_model=list[PropertyOut])
def list_properties(db: Session = Depends(get_db)):
    return list(db.scalars(select(Property).order_by(Property.property_id.asc())).all())


@router.get("/{property_id}", response_model=PropertyOut)
def get_property(property_id: int, db: Session = Depends(get_db)):
    return must_get_property(db, property_id=property_id)


@router.post("", response_model=PropertyOut, status_code=201)
def create_property(payload: PropertyCreate, db: Session = Depends(get_db)):
    row = Property(**payload.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def _apply_update(db: Session, property_id: int, payload: PropertyUpdate) -> Property:
    row = must_get_property(db, property_id=property_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if k in ("property_name", "owner", "address") and v is None:
            raise HTTPException(status_code=400, detail=f"{k} cannot be null")
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row


@router.patch("/{property_id}", response_model=PropertyOut)
def patch_property(property_id: int, payload: PropertyUpdate, db: Session = Depends(get_db)):
    return _apply_update(db, property_id, payload)


@router.put("/{property_id}", response_model=PropertyOut)
def put_property(property_id: int, payload: PropertyUpdate, db: Session = Depends(get_db)):
    return _apply_update(db, property_id, payload)


@router.delete("/{property_id}", status_code=204, response_class=Response)
def delete_property(property_id: int, db: Session = Depends(get_db)):
    """
    Removes the property together with its loan, purchase, rent log, payment
    log, transaction and tenant rows in one transaction.
    """
    try:
        delete_property_cascade(db, property_id=property_id)
    except NoResultFound:
        raise HTTPException(status_code=404, detail={"message": "Property not found"})
    except Exception as e:
        log.exception("DELETE /properties/%s failed", property_id)
        raise HTTPException(status_code=500, detail={"message": "Delete failed", "details": str(e)})
    return Response(status_code=204)
