# backend/propmgr/workers/geocode_tasks.py
from __future__ import annotations

import logging

from ..db import SessionLocal
from ..services.geocoding import geocode_missing
from .celery_app import celery_app

log = logging.getLogger("propmgr.workers.geocode")


@celery_app.task(
    bind=True,
    name="propmgr.workers.geocode_tasks.geocode_missing_properties",
)
def geocode_missing_properties(self) -> dict:
    """
    Same batch as POST /api/admin/geocode-missing, off the request path.
    Per-property failures are skipped inside the batch, so a retry would
    only repeat the throttled walk; none is configured.
    """
    db = SessionLocal()
    try:
        out = geocode_missing(db)
        log.info("geocode task finished: %s updated", out["updated_count"], extra={"task_id": self.request.id})
        return out
    finally:
        db.close()
