import os

# Settings are read at import time; force a private in-memory store.
os.environ["DATABASE_URL"] = ":memory:"
os.environ["ENABLE_DEBUG_ROUTES"] = "true"

import pytest
from fastapi.testclient import TestClient

from country_atlas_api.app.core.db import reset_db
from country_atlas_api.app.main import app


GERMANY = {
    "name": "Germany",
    "alpha2Code": "DE",
    "alpha3Code": "DEU",
    "capital": "Berlin",
    "region": "Europe",
    "subregion": "Western Europe",
    "population": 83240525,
    "area": 357114,
    "independent": True,
    "unMember": True,
    "borders": ["AUT", "BEL", "FRA", "POL"],
    "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
    "flag": "🇩🇪",
    "countryInfo": {"governmentForm": "Federal parliamentary republic"},
}

FRANCE = {
    "name": "France",
    "alpha2Code": "FR",
    "alpha3Code": "FRA",
    "capital": "Paris",
    "region": "Europe",
}


@pytest.fixture(autouse=True)
def _fresh_store():
    reset_db()
    yield


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def germany(client):
    r = client.post("/api/countries", json=GERMANY)
    assert r.status_code == 201, r.text
    return r.json()


@pytest.fixture()
def france(client):
    r = client.post("/api/countries", json=FRANCE)
    assert r.status_code == 201, r.text
    return r.json()
