# backend/propmgr/services/contacts.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import HTTPException
from sqlalchemy import desc, or_, select
from sqlalchemy.orm import Session

from ..domain.phone import is_valid_phone, normalize_phone, to_digits
from ..models import Contact
from ..schemas import ContactCreate, ContactOut, ContactUpdate


def _bad_request(msg: str) -> HTTPException:
    return HTTPException(status_code=400, detail=msg)


def _clean_name(raw: Any) -> str:
    name = str(raw or "").strip()
    if not name:
        raise _bad_request("name is required")
    return name


def _clean_phone(raw: Any) -> str:
    digits = normalize_phone(str(raw or ""))
    if not is_valid_phone(digits):
        raise _bad_request("phone must have 10 digits")
    return digits


def _blank_to_none(raw: Any) -> Optional[str]:
    return str(raw) if raw else None


def contact_fields_for_create(payload: ContactCreate) -> dict[str, Any]:
    return {
        "contact_name": _clean_name(payload.name),
        "contact_phone": _clean_phone(payload.phone),
        "contact_email": payload.email or None,
        "contact_type": payload.contact_type or None,
        "contact_notes": payload.notes or None,
    }


def contact_fields_for_update(payload: ContactUpdate) -> dict[str, Any]:
    """Only fields the client actually sent are validated and written."""
    sent = payload.model_fields_set
    patch: dict[str, Any] = {}
    if "name" in sent:
        patch["contact_name"] = _clean_name(payload.name)
    if "phone" in sent:
        patch["contact_phone"] = _clean_phone(payload.phone)
    if "email" in sent:
        patch["contact_email"] = _blank_to_none(payload.email)
    if "contact_type" in sent:
        patch["contact_type"] = _blank_to_none(payload.contact_type)
    if "notes" in sent:
        patch["contact_notes"] = _blank_to_none(payload.notes)
    return patch


def search_contacts(db: Session, q: Optional[str] = None) -> list[Contact]:
    search = (q or "").strip()
    digits = to_digits(q)

    stmt = select(Contact)
    if search or digits:
        like = f"%{search.lower()}%"
        conds = [
            Contact.contact_name.ilike(like),
            Contact.contact_email.ilike(like),
            Contact.contact_type.ilike(like),
            Contact.contact_notes.ilike(like),
        ]
        if digits:
            conds.append(Contact.contact_phone.contains(digits))
        stmt = stmt.where(or_(*conds))

    stmt = stmt.order_by(desc(Contact.updated_at), desc(Contact.contact_id))
    return list(db.scalars(stmt).all())


def _epoch_ms(v: Optional[datetime]) -> int:
    if v is None:
        return 0
    if v.tzinfo is None:
        v = v.replace(tzinfo=timezone.utc)  # stored as naive UTC
    return int(v.timestamp() * 1000)


def to_ui(c: Contact) -> ContactOut:
    return ContactOut(
        contact_id=c.contact_id,
        name=c.contact_name,
        phone=c.contact_phone,
        email=c.contact_email or "",
        contact_type=c.contact_type or "",
        notes=c.contact_notes or "",
        created_at=_epoch_ms(c.created_at),
        updated_at=_epoch_ms(c.updated_at),
    )
