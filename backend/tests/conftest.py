# backend/tests/conftest.py
from __future__ import annotations

import os
import tempfile

# Point the app at a throwaway SQLite file before propmgr.config is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="propmgr-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["GEOCODE_DELAY_SECONDS"] = "0"

import pytest
from fastapi.testclient import TestClient

from propmgr import models  # noqa: F401
from propmgr.db import Base, SessionLocal, engine
from propmgr.main import create_app

Base.metadata.create_all(bind=engine)


@pytest.fixture(autouse=True)
def _clean_tables():
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def make_property(client):
    counter = {"n": 0}

    def _mk(**overrides) -> dict:
        counter["n"] += 1
        payload = {
            "property_name": f"Test Property {counter['n']}",
            "owner": "Jane Owner",
            "address": f"{100 + counter['n']} Main St",
            "city": "Detroit",
            "state": "MI",
            "zipcode": "48201",
        }
        payload.update(overrides)
        r = client.post("/api/properties", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _mk
