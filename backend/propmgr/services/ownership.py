# backend/propmgr/services/ownership.py
from __future__ import annotations

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Contact, LoanDetails, Property, PurchaseDetails, Tenant, Transaction


def must_get_property(db: Session, *, property_id: int) -> Property:
    row = db.scalar(select(Property).where(Property.property_id == property_id))
    if not row:
        raise HTTPException(status_code=404, detail="Property not found")
    return row


def must_get_purchase(db: Session, *, purchase_id: int) -> PurchaseDetails:
    row = db.scalar(select(PurchaseDetails).where(PurchaseDetails.purchase_id == purchase_id))
    if not row:
        raise HTTPException(status_code=404, detail="Purchase details not found")
    return row


def must_get_loan(db: Session, *, loan_id: str) -> LoanDetails:
    row = db.scalar(select(LoanDetails).where(LoanDetails.loan_id == loan_id))
    if not row:
        raise HTTPException(status_code=404, detail="Loan not found")
    return row


def must_get_transaction(db: Session, *, transaction_id: int) -> Transaction:
    row = db.scalar(select(Transaction).where(Transaction.transaction_id == transaction_id))
    if not row:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return row


def must_get_contact(db: Session, *, contact_id: int) -> Contact:
    row = db.scalar(select(Contact).where(Contact.contact_id == contact_id))
    if not row:
        raise HTTPException(status_code=404, detail="Contact not found")
    return row


def must_get_tenant(db: Session, *, tenant_id: int) -> Tenant:
    row = db.scalar(select(Tenant).where(Tenant.tenant_id == tenant_id))
    if not row:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return row
