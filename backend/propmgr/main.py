# backend/propmgr/main.py
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .errors import setup_exception_handlers

from .middleware.request_context import REQUEST_ID_HEADER, RequestContextMiddleware

from .routers.health import router as health_router

from .routers.properties import router as properties_router
from .routers.purchase_details import router as purchase_details_router
from .routers.loan_details import router as loan_details_router

from .routers.rent_log import router as rent_log_router
from .routers.payment_log import router as payment_log_router
from .routers.transactions import router as transactions_router

from .routers.contacts import router as contacts_router
from .routers.tenants import router as tenants_router

from .routers.markers import router as markers_router
from .routers.reports import router as reports_router

API_PREFIX = "/api"


def _cors_origins() -> list[str]:
    val = getattr(settings, "cors_allow_origins", ["*"])
    if isinstance(val, str):
        v = val.strip()
        return ["*"] if v == "*" else [x.strip() for x in v.split(",") if x.strip()]
    if isinstance(val, list) and val:
        return val
    return ["*"]


def create_app() -> FastAPI:
    app = FastAPI(title="Property Manager API", version="0.1.0")

    app.add_middleware(RequestContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    setup_exception_handlers(app)

    # Liveness stays outside /api for the container healthcheck
    app.include_router(health_router)

    # Portfolio
    app.include_router(properties_router, prefix=API_PREFIX)
    app.include_router(purchase_details_router, prefix=API_PREFIX)
    app.include_router(loan_details_router, prefix=API_PREFIX)

    # Monthly logs + ledger
    app.include_router(rent_log_router, prefix=API_PREFIX)
    app.include_router(payment_log_router, prefix=API_PREFIX)
    app.include_router(transactions_router, prefix=API_PREFIX)

    # People
    app.include_router(contacts_router, prefix=API_PREFIX)
    app.include_router(tenants_router, prefix=API_PREFIX)

    # Map + reporting
    app.include_router(markers_router, prefix=API_PREFIX)
    app.include_router(reports_router, prefix=API_PREFIX)

    return app


app = create_app()
