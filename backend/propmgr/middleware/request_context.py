# backend/propmgr/middleware/request_context.py
from __future__ import annotations

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_request_id: ContextVar[Optional[str]] = ContextVar("propmgr_request_id", default=None)

log = logging.getLogger("propmgr.request")


def current_request_id() -> Optional[str]:
    return _request_id.get()


def _route_template(request: Request) -> str:
    # "/api/properties/{property_id}" rather than the concrete path, so log lines group
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def _property_id(request: Request) -> Optional[int]:
    raw = request.path_params.get("property_id") or request.query_params.get("property_id")
    try:
        return int(raw) if raw is not None else None
    except (TypeError, ValueError):
        return None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Per-request context: reuses or mints a request id, exposes it to log
    records through a contextvar, echoes it back in X-Request-ID and writes
    a single access line when the response is ready.

    A client-supplied id lets a failed optimistic edit in the UI be matched
    to its server log line.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = rid
        token = _request_id.set(rid)

        started = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            extra = {
                "method": request.method,
                "route": _route_template(request),
                "status_code": status,
                "latency_ms": round((time.perf_counter() - started) * 1000, 1),
            }
            pid = _property_id(request)
            if pid is not None:
                extra["property_id"] = pid
            level = logging.WARNING if status >= 500 else logging.INFO
            log.log(level, "%s %s -> %s", request.method, request.url.path, status, extra=extra)
            _request_id.reset(token)
