# backend/propmgr/routers/markers.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..clients.nominatim import NominatimClient
from ..config import settings
from ..db import get_db
from ..models import Property
from ..schemas import GeocodeBatchOut, PropertyMarkerOut
from ..services.geocoding import Geocoder, geocode_missing

router = APIRouter(tags=["map"])

log = logging.getLogger("propmgr.markers")


def get_geocoder() -> Geocoder:
    return NominatimClient()


def get_geocode_delay() -> float:
    return settings.geocode_delay_seconds


@router.get("/property_markers", response_model=list[PropertyMarkerOut])
def property_markers(db: Session = Depends(get_db)):
    rows = db.scalars(select(Property).order_by(Property.property_id.asc())).all()
    return [
        PropertyMarkerOut(
            id=p.property_id,
            name=p.property_name,
            address=p.address,
            city=p.city or "",
            state=p.state or "",
            zipcode=p.zipcode or "",
            lat=p.lat,
            lng=p.lng,
        )
        for p in rows
    ]


@router.post("/admin/geocode-missing", response_model=GeocodeBatchOut)
def admin_geocode_missing(
    db: Session = Depends(get_db),
    geocoder: Geocoder = Depends(get_geocoder),
    delay: float = Depends(get_geocode_delay),
):
    """Blocking batch; at ~1 request/second this takes as long as the backlog is."""
    try:
        return geocode_missing(db, geocoder=geocoder, delay_seconds=delay)
    except Exception:
        log.exception("geocode batch failed")
        raise HTTPException(status_code=500, detail="Geocoding failed")
