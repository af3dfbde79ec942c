# backend/propmgr/client/api_client.py
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import settings

log = logging.getLogger("propmgr.client")


class ApiError(Exception):
    """Non-2xx response from the API; `message` is what the UI shows in its banner."""

    def __init__(self, status_code: int, message: str, body: Any = None) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body


def _error_message(r: httpx.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text or r.reason_phrase
    if isinstance(body, dict):
        return str(body.get("error") or body.get("message") or body)
    return str(body)


class PropertyManagerClient:
    """
    Thin wrapper over the REST API.

    Pass `http` to reuse a configured client (a FastAPI TestClient works,
    since it is an httpx.Client); otherwise one is created against base_url.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        http: Optional[httpx.Client] = None,
        timeout: float = 20.0,
    ) -> None:
        if http is None:
            base = (base_url or f"http://localhost:{settings.port}").rstrip("/")
            http = httpx.Client(base_url=base, timeout=timeout)
        self.http = http

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PropertyManagerClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        r = self.http.request(method, f"/api{path}", json=json, params=params or None)
        if r.status_code >= 400:
            msg = _error_message(r)
            log.info("%s %s -> %s %s", method, path, r.status_code, msg)
            raise ApiError(r.status_code, msg, body=r.text)
        if r.status_code == 204 or not r.content:
            return None
        return r.json()

    # ---- properties ----
    def list_properties(self) -> list[dict]:
        return self._request("GET", "/properties")

    def get_property(self, property_id: int) -> dict:
        return self._request("GET", f"/properties/{property_id}")

    def create_property(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/properties", json=data)

    def update_property(self, property_id: int, patch: dict[str, Any]) -> dict:
        return self._request("PATCH", f"/properties/{property_id}", json=patch)

    def delete_property(self, property_id: int) -> None:
        self._request("DELETE", f"/properties/{property_id}")

    # ---- purchase / loan ----
    def get_purchase_details(self, property_id: int) -> Optional[dict]:
        data = self._request("GET", "/purchase_details", params={"property_id": property_id})
        return None if data.get("error") == "not_found" else data

    def create_purchase_details(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/purchase_details", json=data)

    def update_purchase_details(self, purchase_id: int, patch: dict[str, Any]) -> dict:
        return self._request("PATCH", f"/purchase_details/{purchase_id}", json=patch)

    def get_loan_details(self, property_id: int) -> Optional[dict]:
        data = self._request("GET", "/loan_details", params={"property_id": property_id})
        return None if data.get("error") == "not_found" else data

    def create_loan_details(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/loan_details", json=data)

    def update_loan_details(self, loan_id: str, patch: dict[str, Any]) -> dict:
        return self._request("PATCH", f"/loan_details/{loan_id}", json=patch)

    # ---- monthly logs ----
    def list_rent_log(self, property_id: int, year: Optional[int] = None) -> list[dict]:
        return self._request("GET", "/rentlog", params={"property_id": property_id, "year": year})

    def save_rent_log(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/rentlog", json=data)

    def list_payment_log(self, property_id: int, year: int) -> list[dict]:
        return self._request("GET", "/paymentlog", params={"property_id": property_id, "year": year})

    def save_payment_log(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/paymentlog", json=data)

    # ---- transactions ----
    def list_transactions(self, property_id: int, year: Optional[int] = None) -> list[dict]:
        return self._request("GET", "/transactions", params={"property_id": property_id, "year": year})

    def create_transaction(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/transactions", json=data)

    def update_transaction(self, transaction_id: int, patch: dict[str, Any]) -> dict:
        return self._request("PATCH", f"/transactions/{transaction_id}", json=patch)

    def delete_transaction(self, transaction_id: int) -> None:
        self._request("DELETE", f"/transactions/{transaction_id}")

    # ---- contacts ----
    def list_contacts(self, q: Optional[str] = None) -> list[dict]:
        return self._request("GET", "/contacts", params={"q": q})

    def create_contact(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/contacts", json=data)

    def update_contact(self, contact_id: int, patch: dict[str, Any]) -> dict:
        return self._request("PATCH", f"/contacts/{contact_id}", json=patch)

    def delete_contact(self, contact_id: int) -> None:
        self._request("DELETE", f"/contacts/{contact_id}")

    # ---- tenants ----
    def list_tenants(self, property_id: int) -> list[dict]:
        return self._request("GET", "/tenant", params={"property_id": property_id})

    def save_tenant(self, data: dict[str, Any]) -> dict:
        return self._request("POST", "/tenant", json=data)

    def update_tenant(self, tenant_id: int, patch: dict[str, Any]) -> dict:
        return self._request("PATCH", f"/tenant/{tenant_id}", json=patch)

    def delete_tenant(self, tenant_id: int) -> None:
        self._request("DELETE", f"/tenant/{tenant_id}")

    # ---- map ----
    def property_markers(self) -> list[dict]:
        return self._request("GET", "/property_markers")

    def geocode_missing(self) -> dict:
        return self._request("POST", "/admin/geocode-missing")
