from __future__ import annotations

import httpx
import pytest

from propmgr.clients.nominatim import GeocodeHit, NominatimClient
from propmgr.models import Property
from propmgr.routers.markers import get_geocode_delay, get_geocoder
from propmgr.services.geocoding import full_address, geocode_missing


class FakeGeocoder:
    def __init__(self, answers: dict):
        self.answers = answers
        self.queries: list[str] = []

    def geocode(self, query: str):
        self.queries.append(query)
        ans = self.answers.get(query)
        if isinstance(ans, Exception):
            raise ans
        return ans


def test_full_address_skips_blank_parts():
    p = Property(address="1 Main St", city="Detroit", state=" ", zipcode="48201")
    assert full_address(p) == "1 Main St, Detroit, 48201"


def test_batch_fills_hits_skips_failures_and_throttles(db, make_property):
    a = make_property(address="1 A St")
    b = make_property(address="2 B St")
    make_property(address="3 C St", lat=42.0, lng=-83.0)
    d = make_property(address="4 D St")

    fake = FakeGeocoder(
        {
            "1 A St, Detroit, MI, 48201": GeocodeHit(lat=42.33, lng=-83.05, display_name="A", raw={}),
            "2 B St, Detroit, MI, 48201": httpx.ConnectError("down"),
            "4 D St, Detroit, MI, 48201": None,
        }
    )
    sleeps: list[float] = []

    out = geocode_missing(db, geocoder=fake, delay_seconds=1.1, sleep=sleeps.append)

    assert out == {"updated_count": 1, "ids": [a["property_id"]]}
    assert len(fake.queries) == 3
    assert sleeps == [1.1, 1.1]

    db.expire_all()
    hit = db.get(Property, a["property_id"])
    assert (hit.lat, hit.lng) == (42.33, -83.05)
    assert hit.geocoded_at is not None
    assert db.get(Property, b["property_id"]).lat is None
    assert db.get(Property, d["property_id"]).lat is None


def test_admin_endpoint_uses_injected_geocoder(app, client, make_property):
    p = make_property(address="7 Oak St")
    fake = FakeGeocoder({"7 Oak St, Detroit, MI, 48201": GeocodeHit(lat=1.5, lng=2.5, display_name=None, raw={})})
    app.dependency_overrides[get_geocoder] = lambda: fake
    app.dependency_overrides[get_geocode_delay] = lambda: 0.0

    r = client.post("/api/admin/geocode-missing")
    assert r.status_code == 200
    assert r.json() == {"updated_count": 1, "ids": [p["property_id"]]}

    markers = client.get("/api/property_markers").json()
    assert markers == [
        {
            "id": p["property_id"],
            "name": p["property_name"],
            "address": "7 Oak St",
            "city": "Detroit",
            "state": "MI",
            "zipcode": "48201",
            "lat": 1.5,
            "lng": 2.5,
        }
    ]


def _client_with(handler) -> NominatimClient:
    return NominatimClient(http=httpx.Client(transport=httpx.MockTransport(handler)))


def test_nominatim_request_and_parse():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        seen["ua"] = request.headers.get("user-agent")
        seen["path"] = request.url.path
        return httpx.Response(200, json=[{"lat": "42.3314", "lon": "-83.0458", "display_name": "Detroit"}])

    hit = _client_with(handler).geocode("1 Main St, Detroit, MI")
    assert hit is not None
    assert (hit.lat, hit.lng) == (42.3314, -83.0458)
    assert seen["path"] == "/search"
    assert seen["params"] == {"format": "json", "limit": "1", "q": "1 Main St, Detroit, MI"}
    assert seen["ua"].startswith("PropertyManager/")


def test_nominatim_miss_returns_none():
    assert _client_with(lambda req: httpx.Response(200, json=[])).geocode("nowhere") is None
    assert _client_with(lambda req: httpx.Response(200, json=[{"lat": "x"}])).geocode("bad") is None


def test_nominatim_http_error_propagates():
    with pytest.raises(httpx.HTTPStatusError):
        _client_with(lambda req: httpx.Response(503)).geocode("busy")


def test_blank_address_is_skipped_without_a_pause(db, make_property):
    first = make_property(address="1 A St")
    db.add(Property(property_name="Blank", owner="x", address=" "))
    db.commit()
    last = make_property(address="2 B St")

    fake = FakeGeocoder({})
    sleeps: list[float] = []
    out = geocode_missing(db, geocoder=fake, delay_seconds=1.1, sleep=sleeps.append)

    assert out["updated_count"] == 0
    assert fake.queries == ["1 A St, Detroit, MI, 48201", "2 B St, Detroit, MI, 48201"]
    assert sleeps == [1.1]
    assert first["property_id"] < last["property_id"]
