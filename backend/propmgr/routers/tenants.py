# backend/propmgr/routers/tenants.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Tenant
from ..schemas import TenantCreate, TenantOut, TenantUpdate
from ..services.natural_key import upsert_by_natural_key
from ..services.ownership import must_get_tenant

router = APIRouter(prefix="/tenant", tags=["tenants"])


@router.get("", response_model=list[TenantOut])
def list_tenants(property_id: int = Query(..., gt=0), db: Session = Depends(get_db)):
    q = select(Tenant).where(Tenant.property_id == property_id).order_by(Tenant.tenant_id.asc())
    return list(db.scalars(q).all())


@router.post("", response_model=TenantOut, status_code=201)
def upsert_tenant(payload: TenantCreate, db: Session = Depends(get_db)):
    """A tenant is identified by property + name + lease start; re-posting updates it."""
    key = {
        "property_id": payload.property_id,
        "tenant_name": payload.tenant_name,
        "lease_start": payload.lease_start,
    }
    fields = {
        "tenant_status": payload.tenant_status,
        "lease_end": payload.lease_end,
        "rent_amount": payload.rent_amount,
    }
    create = {**fields, "tenant_status": payload.tenant_status or "Inactive"}
    return upsert_by_natural_key(db, Tenant, key=key, create=create, update=fields)


@router.patch("/{tenant_id}", response_model=TenantOut)
def update_tenant(tenant_id: int, payload: TenantUpdate, db: Session = Depends(get_db)):
    """
    Partial update. Explicit nulls are ignored like omitted fields, so a
    lease_end cannot be cleared through this route.
    """
    row = must_get_tenant(db, tenant_id=tenant_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if v is not None:
            setattr(row, k, v)
    db.commit()
    db.refresh(row)
    return row


@router.delete("/{tenant_id}", status_code=204, response_class=Response)
def delete_tenant(tenant_id: int, db: Session = Depends(get_db)):
    row = must_get_tenant(db, tenant_id=tenant_id)
    db.delete(row)
    db.commit()
    return Response(status_code=204)
