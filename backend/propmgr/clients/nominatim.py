from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx

from ..config import settings


@dataclass(frozen=True)
class GeocodeHit:
    lat: float
    lng: float
    display_name: Optional[str]
    raw: dict[str, Any]


class NominatimClient:
    """
    OpenStreetMap Nominatim search. The public instance asks for an
    identifying User-Agent and at most one request per second; throttling is
    the caller's job (services/geocoding.py).
    """

    def __init__(self, http: Optional[httpx.Client] = None) -> None:
        self.base = settings.geocoder_base_url.rstrip("/")
        self.user_agent = settings.geocoder_user_agent
        self.accept_language = settings.geocoder_accept_language
        self.timeout = float(settings.geocoder_timeout_seconds)
        self._http = http

    def _headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept-Language": self.accept_language}

    def _get(self, url: str, params: dict[str, Any]) -> httpx.Response:
        if self._http is not None:
            return self._http.get(url, params=params, headers=self._headers())
        with httpx.Client(timeout=self.timeout) as client:
            return client.get(url, params=params, headers=self._headers())

    def geocode(self, query: str) -> Optional[GeocodeHit]:
        """
        First match for a free-form address, or None on a miss.
        Transport and HTTP errors propagate as httpx.HTTPError.
        """
        url = f"{self.base}/search"
        params = {"format": "json", "limit": 1, "q": query}

        r = self._get(url, params)
        r.raise_for_status()
        data = r.json()

        if not isinstance(data, list) or not data:
            return None
        first = data[0]
        if not isinstance(first, dict):
            return None
        try:
            lat = float(first["lat"])
            lng = float(first["lon"])
        except (KeyError, TypeError, ValueError):
            return None
        return GeocodeHit(lat=lat, lng=lng, display_name=first.get("display_name"), raw=first)
