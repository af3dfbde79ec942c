# backend/propmgr/routers/health.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..db import get_db

router = APIRouter(tags=["health"])

log = logging.getLogger("propmgr.health")


@router.get("/health")
def health(db: Session = Depends(get_db)):
    """Liveness plus a round trip to the database (used by the container healthcheck)."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        log.exception("health check: database unreachable")
        return JSONResponse(status_code=500, content={"status": "error", "db": False})
    return {"status": "ok"}
