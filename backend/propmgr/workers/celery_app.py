# backend/propmgr/workers/celery_app.py
from __future__ import annotations

from celery import Celery
from celery.signals import setup_logging

from ..config import settings

celery_app = Celery(
    "propmgr",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=["propmgr.workers.geocode_tasks"],
)

celery_app.conf.update(
    task_acks_late=True,
    worker_prefetch_multiplier=1,
    task_reject_on_worker_lost=True,
    task_track_started=True,
    timezone="UTC",
)

# Nominatim allows one request per second per client: keep one consumer on this queue.
celery_app.conf.task_routes = {
    "propmgr.workers.geocode_tasks.*": {"queue": "geocode"},
}


@setup_logging.connect
def _configure_worker_logging(**_kwargs) -> None:
    from ..logging_config import configure_logging

    configure_logging()
