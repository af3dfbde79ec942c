# backend/propmgr/routers/contacts.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Contact
from ..schemas import ContactCreate, ContactOut, ContactUpdate
from ..services.contacts import contact_fields_for_create, contact_fields_for_update, search_contacts, to_ui
from ..services.ownership import must_get_contact

router = APIRouter(prefix="/contacts", tags=["contacts"])

log = logging.getLogger("propmgr.contacts")


@router.get("", response_model=list[ContactOut])
def list_contacts(q: Optional[str] = Query(default=None), db: Session = Depends(get_db)):
    return [to_ui(c) for c in search_contacts(db, q)]


@router.get("/{contact_id}", response_model=ContactOut)
def get_contact(contact_id: int, db: Session = Depends(get_db)):
    return to_ui(must_get_contact(db, contact_id=contact_id))


@router.post("", response_model=ContactOut, status_code=201)
def create_contact(payload: ContactCreate, db: Session = Depends(get_db)):
    row = Contact(**contact_fields_for_create(payload))
    db.add(row)
    db.commit()
    db.refresh(row)
    log.info("contact created", extra={"contact_id": row.contact_id})
    return to_ui(row)


@router.patch("/{contact_id}", response_model=ContactOut)
def update_contact(contact_id: int, payload: ContactUpdate, db: Session = Depends(get_db)):
    row = must_get_contact(db, contact_id=contact_id)
    for k, v in contact_fields_for_update(payload).items():
        setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return to_ui(row)


@router.delete("/{contact_id}", status_code=204, response_class=Response)
def delete_contact(contact_id: int, db: Session = Depends(get_db)):
    row = must_get_contact(db, contact_id=contact_id)
    db.delete(row)
    db.commit()
    return Response(status_code=204)
