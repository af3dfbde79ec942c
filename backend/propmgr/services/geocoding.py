# backend/propmgr/services/geocoding.py
from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Callable, Optional, Protocol

import httpx
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from ..clients.nominatim import GeocodeHit, NominatimClient
from ..config import settings
from ..models import Property

log = logging.getLogger("propmgr.geocoding")


class Geocoder(Protocol):
    def geocode(self, query: str) -> Optional[GeocodeHit]: ...


def full_address(p: Property) -> str:
    parts = [p.address, p.city, p.state, p.zipcode]
    return ", ".join(str(x).strip() for x in parts if x and str(x).strip())


def properties_missing_coordinates(db: Session) -> list[Property]:
    q = (
        select(Property)
        .where(or_(Property.lat.is_(None), Property.lng.is_(None)))
        .order_by(Property.property_id.asc())
    )
    return list(db.scalars(q).all())


def _lookup(geocoder: Geocoder, query: str, property_id: int) -> Optional[GeocodeHit]:
    try:
        return geocoder.geocode(query)
    except (httpx.HTTPError, ValueError) as e:
        # ValueError covers a non-JSON body
        log.warning("geocode request failed: %s", e, extra={"property_id": property_id})
        return None


def geocode_missing(
    db: Session,
    *,
    geocoder: Optional[Geocoder] = None,
    delay_seconds: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> dict:
    """
    Fill lat/lng for every property that lacks them, one request at a time
    with a fixed pause between requests. A miss or a failed request leaves
    that property untouched and moves on.

    Returns {"updated_count": n, "ids": [...]}.
    """
    geocoder = geocoder or NominatimClient()
    delay = settings.geocode_delay_seconds if delay_seconds is None else float(delay_seconds)

    props = properties_missing_coordinates(db)
    updated: list[int] = []

    requested = False
    for p in props:
        query = full_address(p)
        hit = None
        if query:
            # pause between outbound requests only, never before the first
            if requested and delay > 0:
                sleep(delay)
            hit = _lookup(geocoder, query, p.property_id)
            requested = True

        if hit is not None:
            p.lat = hit.lat
            p.lng = hit.lng
            p.geocoded_at = datetime.utcnow()
            db.commit()
            updated.append(p.property_id)
        else:
            log.info("no geocode match for %r", query, extra={"property_id": p.property_id})

    log.info("geocode batch done: %d/%d updated", len(updated), len(props))
    return {"updated_count": len(updated), "ids": updated}
