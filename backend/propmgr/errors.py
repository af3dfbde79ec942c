# backend/propmgr/errors.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

log = logging.getLogger("propmgr.errors")


def _validation_message(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = [str(x) for x in err.get("loc", ()) if x not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {err.get('msg', 'invalid')}")
    return "; ".join(parts) or "invalid request"


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Error taxonomy:
      - validation (bad/missing input)         -> 400 {"error": ...}
      - persistence "row missing" signal       -> 404
      - constraint violations                  -> 400 with details
      - any other persistence failure          -> 500 with details
      - anything else                          -> 500 with details
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # dict details are already shaped by the router ({"message": ..., "details": ...})
        body = exc.detail if isinstance(exc.detail, dict) else {"error": str(exc.detail)}
        return JSONResponse(content=body, status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(content={"error": _validation_message(exc)}, status_code=400)

    @app.exception_handler(NoResultFound)
    async def not_found_handler(request: Request, exc: NoResultFound):
        return JSONResponse(content={"error": "Not found"}, status_code=404)

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError):
        log.warning("integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
        return JSONResponse(
            content={"error": "Constraint violation", "details": str(exc.orig)},
            status_code=400,
        )

    @app.exception_handler(SQLAlchemyError)
    async def persistence_handler(request: Request, exc: SQLAlchemyError):
        log.exception("database error on %s %s", request.method, request.url.path)
        return JSONResponse(
            content={"error": "Database operation failed", "details": str(exc)},
            status_code=500,
        )

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception):
        log.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            content={"error": "Internal server error", "details": str(exc)},
            status_code=500,
        )
