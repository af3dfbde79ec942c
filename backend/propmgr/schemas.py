# backend/propmgr/schemas.py
from __future__ import annotations

import datetime as dt
from typing import Annotated, Any, Optional, List

from pydantic import BaseModel, BeforeValidator, Field, ConfigDict


def _date_or_none(v: Any) -> Any:
    """
    The UI posts either plain dates ("2024-03-01"), full ISO timestamps from
    a date picker ("2024-03-01T05:00:00.000Z") or "" for a cleared input.
    """
    if isinstance(v, str):
        s = v.strip()
        if not s:
            return None
        if len(s) > 10 and s[4:5] == "-" and s[10:11] in ("T", " "):
            return s[:10]
        return s
    if isinstance(v, dt.datetime):
        return v.date()
    return v


def _str_or_none(v: Any) -> Any:
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


FormDate = Annotated[Optional[dt.date], BeforeValidator(_date_or_none)]
FormStr = Annotated[Optional[str], BeforeValidator(_str_or_none)]


# -------------------- Properties --------------------

class PropertyBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: FormStr = None
    county: Optional[str] = None
    year: Optional[int] = None
    type: Optional[str] = None
    status: Optional[str] = None
    income_producing: Optional[str] = Field(default=None, pattern="^(YES|NO)$")
    market_value: Optional[float] = None
    lat: Optional[float] = None
    lng: Optional[float] = None


class PropertyCreate(PropertyBase):
    property_name: str = Field(min_length=1)
    owner: str = Field(min_length=1)
    address: str = Field(min_length=1)


class PropertyUpdate(PropertyBase):
    property_name: Optional[str] = Field(default=None, min_length=1)
    owner: Optional[str] = Field(default=None, min_length=1)


class PropertyOut(PropertyBase):
    property_id: int
    property_name: str
    owner: str
    geocoded_at: Optional[dt.datetime] = None
    created_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)


class PropertyMarkerOut(BaseModel):
    id: int
    name: str
    address: str
    city: str = ""
    state: str = ""
    zipcode: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None


class GeocodeBatchOut(BaseModel):
    updated_count: int
    ids: List[int] = Field(default_factory=list)


# -------------------- Purchase / Loan --------------------

class PurchaseDetailsFields(BaseModel):
    model_config = ConfigDict(extra="ignore")

    purchase_price: Optional[float] = None
    down_payment: Optional[float] = None
    financing_type: Optional[str] = None
    acquisition_type: Optional[str] = None
    buyer: Optional[str] = None
    seller: Optional[str] = None
    closing_date: FormDate = None
    closing_costs: Optional[float] = None
    earnest_money: Optional[float] = None
    notes: Optional[str] = None


class PurchaseDetailsCreate(PurchaseDetailsFields):
    property_id: int = Field(gt=0)


class PurchaseDetailsUpdate(PurchaseDetailsFields):
    pass


class PurchaseDetailsOut(BaseModel):
    purchase_id: int
    property_id: int
    purchase_price: float
    down_payment: Optional[float] = None
    financing_type: str
    acquisition_type: str
    buyer: str
    seller: str
    closing_date: dt.date
    closing_costs: float
    earnest_money: Optional[float] = None
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LoanDetailsFields(BaseModel):
    model_config = ConfigDict(extra="ignore")

    loan_amount: Optional[float] = None
    lender: Optional[str] = None
    interest_rate: Optional[float] = None
    loan_term: Optional[int] = None
    loan_start: FormDate = None
    loan_end: FormDate = None
    amortization_period: Optional[int] = None
    monthly_payment: Optional[float] = None
    loan_type: Optional[str] = None
    balloon_payment: Optional[bool] = None
    prepayment_penalty: Optional[bool] = None
    refinanced: Optional[bool] = None
    loan_status: Optional[str] = None
    notes: Optional[str] = None


class LoanDetailsCreate(LoanDetailsFields):
    loan_id: Annotated[str, BeforeValidator(_str_or_none)] = Field(min_length=1)
    property_id: int = Field(gt=0)
    purchase_id: int = Field(gt=0)


class LoanDetailsUpdate(LoanDetailsFields):
    pass


class LoanDetailsByPurchaseUpdate(LoanDetailsFields):
    property_id: int = Field(gt=0)
    purchase_id: int = Field(gt=0)


class LoanDetailsOut(LoanDetailsFields):
    loan_id: str
    property_id: int
    purchase_id: int

    model_config = ConfigDict(from_attributes=True)


# -------------------- Rent log / Payment log --------------------

class MonthKey(BaseModel):
    model_config = ConfigDict(extra="ignore")

    property_id: int = Field(gt=0)
    month: Annotated[str, BeforeValidator(_str_or_none)] = Field(min_length=1, max_length=20)
    year: int = Field(gt=0, le=9999)


class RentLogUpsert(MonthKey):
    rent_amount: Optional[float] = None
    date_deposited: FormDate = None
    check_number: Optional[int] = None
    notes: Optional[str] = None


class RentLogOut(BaseModel):
    rent_id: int
    property_id: int
    month: str
    year: int
    rent_amount: float
    date_deposited: dt.date
    check_number: Optional[int] = None
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentLogUpsert(MonthKey):
    payment_amount: Optional[float] = None
    date_paid: FormDate = None
    check_number: Optional[int] = None
    notes: Optional[str] = None


class PaymentLogOut(BaseModel):
    id: int
    property_id: int
    month: str
    year: int
    payment_amount: Optional[float] = None
    check_number: Optional[int] = None
    notes: Optional[str] = None
    date_paid: FormDate = None

    model_config = ConfigDict(from_attributes=True)


# -------------------- Transactions --------------------

class TransactionCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    property_id: int = Field(gt=0)
    amount: float
    date: Annotated[dt.date, BeforeValidator(_date_or_none)]
    transaction_type: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=255)


class TransactionUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    transaction_amount: Optional[float] = None
    transaction_date: FormDate = None
    transaction_type: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=255)


class TransactionOut(BaseModel):
    transaction_id: int
    property_id: int
    transaction_type: Optional[str] = None
    notes: Optional[str] = None
    transaction_amount: float
    transaction_date: dt.date

    model_config = ConfigDict(from_attributes=True)


# -------------------- Contacts --------------------

class ContactCreate(BaseModel):
    """UI shape. Validation (name / 10-digit phone) lives in services/contacts.py."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    phone: FormStr = None
    email: Optional[str] = None
    contact_type: Optional[str] = None
    notes: Optional[str] = None


class ContactUpdate(ContactCreate):
    pass


class ContactOut(BaseModel):
    contact_id: int
    name: str
    phone: str
    email: str = ""
    contact_type: str = ""
    notes: str = ""
    created_at: int  # epoch ms
    updated_at: int


# -------------------- Tenants --------------------

class TenantFields(BaseModel):
    model_config = ConfigDict(extra="ignore")

    tenant_name: Optional[str] = None
    tenant_status: Optional[str] = None
    lease_start: FormDate = None
    lease_end: FormDate = None
    rent_amount: Optional[float] = None


class TenantCreate(TenantFields):
    # both are part of the upsert key; a NULL key part would merge unrelated tenants
    property_id: int = Field(gt=0)
    tenant_name: str = Field(min_length=1)
    lease_start: Annotated[dt.date, BeforeValidator(_date_or_none)]


class TenantUpdate(TenantFields):
    pass


class TenantOut(TenantFields):
    tenant_id: int
    property_id: int
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = ConfigDict(from_attributes=True)


# -------------------- Reports --------------------

class MonthAmountOut(BaseModel):
    month: int
    amount: Optional[float] = None


class IncomeReportPropertyOut(BaseModel):
    property_id: int
    property_name: str
    rows: List[MonthAmountOut]
    total: float


class IncomeReportOut(BaseModel):
    year: int
    properties: List[IncomeReportPropertyOut]
    grand_total: float


class ExpenseRowOut(BaseModel):
    type: str
    amount: Optional[float] = None
    date: str


class ExpenseReportPropertyOut(BaseModel):
    property_id: int
    property_name: str
    rows: List[ExpenseRowOut]
    total: float


class ExpenseReportOut(BaseModel):
    year: int
    properties: List[ExpenseReportPropertyOut]
    grand_total: float
