# backend/propmgr/cli/seed_demo.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from propmgr.db import SessionLocal
from propmgr.domain.months import MONTHS
from propmgr.models import (
    Contact,
    LoanDetails,
    PaymentLog,
    Property,
    PurchaseDetails,
    RentLog,
    Tenant,
    Transaction,
)


@dataclass(frozen=True)
class SeedResult:
    property_id: int
    purchase_id: int
    loan_id: str
    contact_id: int
    created: bool


def _get_or_create_property(db: Session, *, address: str, city: str, state: str, zipcode: str) -> tuple[Property, bool]:
    row = db.scalar(
        select(Property).where(
            Property.address == address,
            Property.city == city,
            Property.state == state,
            Property.zipcode == zipcode,
        )
    )
    if row:
        return row, False
    row = Property(
        property_name="Maple Duplex",
        owner="Jane Owner",
        address=address,
        city=city,
        state=state,
        zipcode=zipcode,
        county="Wayne",
        year=1952,
        type="Duplex",
        status="Rented",
        income_producing="YES",
        market_value=185000.0,
    )
    db.add(row)
    db.flush()
    return row, True


def seed_demo(*, year: int | None = None, months: int = 3) -> SeedResult:
    """
    One sample property with a purchase, a loan, a few months of rent and
    loan payments, two ledger entries, a tenant and a contact.
    Running it twice reuses the property (address is unique) and leaves the
    monthly rows in place.
    """
    year = year or date.today().year
    db = SessionLocal()
    try:
        prop, created = _get_or_create_property(
            db, address="123 Maple St", city="Detroit", state="MI", zipcode="48201"
        )
        pid = int(prop.property_id)

        purchase = db.scalar(select(PurchaseDetails).where(PurchaseDetails.property_id == pid))
        if not purchase:
            purchase = PurchaseDetails(
                property_id=pid,
                purchase_price=150000.0,
                down_payment=30000.0,
                financing_type="Mortgage",
                acquisition_type="Purchase",
                buyer="Jane Owner",
                seller="Acme Holdings",
                closing_date=date(year - 1, 6, 15),
                closing_costs=4200.0,
                earnest_money=2500.0,
            )
            db.add(purchase)
            db.flush()

        loan_id = f"DEMO-{pid}"
        if not db.get(LoanDetails, loan_id):
            db.add(
                LoanDetails(
                    loan_id=loan_id,
                    property_id=pid,
                    purchase_id=purchase.purchase_id,
                    loan_amount=120000.0,
                    lender="First Demo Bank",
                    interest_rate=6.5,
                    loan_term=30,
                    loan_start=date(year - 1, 7, 1),
                    monthly_payment=758.48,
                    loan_type="Fixed",
                    loan_status="Active",
                )
            )

        for i in range(max(0, min(months, 12))):
            label = MONTHS[i]
            key = dict(property_id=pid, month=label, year=year)
            if not db.scalar(select(RentLog).filter_by(**key)):
                db.add(RentLog(**key, rent_amount=1450.0, date_deposited=date(year, i + 1, 3), check_number=1000 + i))
            if not db.scalar(select(PaymentLog).filter_by(**key)):
                db.add(PaymentLog(**key, payment_amount=758.48, date_paid=date(year, i + 1, 1)))

        if created:
            db.add(Transaction(property_id=pid, transaction_type="Repairs", notes="Water heater",
                               transaction_amount=640.0, transaction_date=date(year, 2, 10)))
            db.add(Transaction(property_id=pid, transaction_type="Insurance", notes="Annual premium",
                               transaction_amount=1180.0, transaction_date=date(year, 1, 20)))
            db.add(Tenant(property_id=pid, tenant_name="Sam Renter", tenant_status="Active",
                          lease_start=date(year, 1, 1), lease_end=date(year, 12, 31), rent_amount=1450.0))

        contact = db.scalar(select(Contact).where(Contact.contact_phone == "3135550100"))
        if not contact:
            contact = Contact(contact_name="Acme Plumbing", contact_phone="3135550100",
                              contact_email="service@acme.example", contact_type="Vendor")
            db.add(contact)

        db.commit()
        return SeedResult(
            property_id=pid,
            purchase_id=int(purchase.purchase_id),
            loan_id=loan_id,
            contact_id=int(contact.contact_id),
            created=created,
        )
    finally:
        db.close()
