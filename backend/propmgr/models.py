# backend/propmgr/models.py
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .db import Base


# -----------------------------
# Core domain: Properties
# -----------------------------
class Property(Base):
    __tablename__ = "properties"
    __table_args__ = (
        UniqueConstraint("address", "city", "state", "zipcode", name="uniq_prop_address"),
        Index("properties_city_state_idx", "city", "state"),
        Index("idx_property_lat_lng", "lat", "lng"),
    )

    property_id: Mapped[int] = mapped_column(Integer, primary_key=True)

    property_name: Mapped[str] = mapped_column(String(255), nullable=False)
    owner: Mapped[str] = mapped_column(Text, nullable=False)  # free text, matched to Contact.contact_name by the UI

    address: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    state: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    zipcode: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    county: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    income_producing: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)  # YES|NO
    market_value: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    lat: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    lng: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    geocoded_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)

    # No ORM cascade here: services/property_delete.py owns dependent-row removal.
    purchase: Mapped[Optional["PurchaseDetails"]] = relationship(back_populates="property", uselist=False)
    loans: Mapped[List["LoanDetails"]] = relationship(back_populates="property")
    rent_logs: Mapped[List["RentLog"]] = relationship(back_populates="property")
    payment_logs: Mapped[List["PaymentLog"]] = relationship(back_populates="property")
    transactions: Mapped[List["Transaction"]] = relationship(back_populates="property")
    tenants: Mapped[List["Tenant"]] = relationship(back_populates="property")


class PurchaseDetails(Base):
    __tablename__ = "purchase_details"

    purchase_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("properties.property_id"), nullable=False, unique=True
    )

    purchase_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    down_payment: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    financing_type: Mapped[str] = mapped_column(Text, nullable=False, default="")
    acquisition_type: Mapped[str] = mapped_column(Text, nullable=False, default="")
    buyer: Mapped[str] = mapped_column(Text, nullable=False, default="")
    seller: Mapped[str] = mapped_column(Text, nullable=False, default="")
    closing_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    closing_costs: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    earnest_money: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    property: Mapped["Property"] = relationship(back_populates="purchase")
    loans: Mapped[List["LoanDetails"]] = relationship(back_populates="purchase")


class LoanDetails(Base):
    __tablename__ = "loan_details"
    __table_args__ = (
        UniqueConstraint("property_id", "purchase_id", name="loan_details_property_id_purchase_id_key"),
        UniqueConstraint("loan_id", "property_id", name="loan_details_loan_id_property_id_key"),
    )

    # the lender's loan number; the row only exists once one is entered
    loan_id: Mapped[str] = mapped_column(String(80), primary_key=True)
    property_id: Mapped[int] = mapped_column(Integer, ForeignKey("properties.property_id"), nullable=False, index=True)
    purchase_id: Mapped[int] = mapped_column(Integer, ForeignKey("purchase_details.purchase_id"), nullable=False)

    loan_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    lender: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    interest_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    loan_term: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    loan_start: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    loan_end: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    amortization_period: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    monthly_payment: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    loan_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    balloon_payment: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    prepayment_penalty: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    refinanced: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    loan_status: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    property: Mapped["Property"] = relationship(back_populates="loans")
    purchase: Mapped["PurchaseDetails"] = relationship(back_populates="loans")


# -----------------------------
# Monthly logs (natural key: property + month + year)
# -----------------------------
class RentLog(Base):
    __tablename__ = "rent_log"
    __table_args__ = (UniqueConstraint("property_id", "month", "year", name="rent_log_property_id_month_year_key"),)

    rent_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[int] = mapped_column(Integer, ForeignKey("properties.property_id"), nullable=False)
    month: Mapped[str] = mapped_column(String(20), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    rent_amount: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    date_deposited: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    check_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    property: Mapped["Property"] = relationship(back_populates="rent_logs")


class PaymentLog(Base):
    __tablename__ = "payment_log"
    __table_args__ = (UniqueConstraint("property_id", "month", "year", name="payment_log_property_id_month_year_key"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[int] = mapped_column(Integer, ForeignKey("properties.property_id"), nullable=False)
    month: Mapped[str] = mapped_column(String(20), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    payment_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    check_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date_paid: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    property: Mapped["Property"] = relationship(back_populates="payment_logs")


# -----------------------------
# Ledger (append-only)
# -----------------------------
class Transaction(Base):
    __tablename__ = "transactions"

    transaction_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[int] = mapped_column(Integer, ForeignKey("properties.property_id"), nullable=False, index=True)

    transaction_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    transaction_amount: Mapped[float] = mapped_column(Float, nullable=False)
    transaction_date: Mapped[date] = mapped_column(Date, nullable=False)

    property: Mapped["Property"] = relationship(back_populates="transactions")


# -----------------------------
# Directory / occupants
# -----------------------------
class Contact(Base):
    __tablename__ = "contacts"

    contact_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    contact_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_phone: Mapped[str] = mapped_column(String(20), nullable=False)  # always 10 digits
    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    contact_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )


class Tenant(Base):
    __tablename__ = "tenant"
    __table_args__ = (
        UniqueConstraint("property_id", "tenant_name", "lease_start", name="unique_property_tenant_start"),
        Index("tenant_tenant_status_idx", "tenant_status"),
        Index("tenant_lease_start_lease_end_idx", "lease_start", "lease_end"),
    )

    tenant_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    property_id: Mapped[int] = mapped_column(Integer, ForeignKey("properties.property_id"), nullable=False)

    tenant_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    tenant_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, default="Inactive")
    lease_start: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    lease_end: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    rent_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    property: Mapped["Property"] = relationship(back_populates="tenants")
