import pytest
import requests

from country_atlas_api.app.services import seed_service
from country_atlas_api.app.services.country_service import CountryService
from country_atlas_api.app.services.fallback_countries import FALLBACK_COUNTRIES
from country_atlas_api.app.services.seed_service import SeedService, map_restcountries_record


ICELAND = {
    "name": {"common": "Iceland", "official": "Iceland"},
    "cca2": "IS",
    "cca3": "ISL",
    "capital": ["Reykjavik"],
    "region": "Europe",
    "subregion": "Northern Europe",
    "population": 366425,
    "area": 103000,
    "flags": {"svg": "https://flagcdn.com/is.svg"},
    "flag": "🇮🇸",
}


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)

    def json(self):
        return self._payload


@pytest.fixture()
def remote(monkeypatch):
    """Replace the restcountries call; set ``remote.response`` or ``remote.error``."""

    class Remote:
        response = None
        error = None
        calls = []

    def fake_get(url, timeout=None):
        Remote.calls.append((url, timeout))
        if Remote.error is not None:
            raise Remote.error
        return Remote.response

    monkeypatch.setattr(seed_service.requests, "get", fake_get)
    return Remote


def test_initialize_from_restcountries(client, remote):
    remote.response = FakeResponse([ICELAND])
    r = client.get("/api/initialize")
    assert r.status_code == 200
    assert r.json() == {
        "success": True,
        "message": "Countries data initialized successfully",
        "source": "restcountries",
        "created": 1,
    }
    url, timeout = remote.calls[0]
    assert url.startswith("https://restcountries.com/")
    assert timeout

    country = client.get("/api/countries/code/ISL").json()
    assert country["name"] == "Iceland"
    assert country["capital"] == "Reykjavik"
    assert country["flagUrl"] == "https://flagcdn.com/is.svg"
    assert country["countryInfo"]["capital"] == "Reykjavik"
    assert country["countryInfo"]["governmentForm"] is None


def test_initialize_skips_duplicates_and_bad_records(client, remote):
    renamed = dict(ICELAND, name={"common": "Iceland again"})
    no_codes = {"name": {"common": "Atlantis"}}
    remote.response = FakeResponse([ICELAND, renamed, no_codes, "garbage"])

    r = client.get("/api/initialize")
    assert r.json()["created"] == 1
    assert [c["name"] for c in client.get("/api/countries").json()] == ["Iceland"]


def test_initialize_falls_back_when_unreachable(client, remote):
    remote.error = requests.ConnectionError("no route to host")
    r = client.get("/api/initialize")
    assert r.status_code == 200
    body = r.json()
    assert body["source"] == "fallback"
    assert body["created"] == len(FALLBACK_COUNTRIES)

    countries = client.get("/api/countries").json()
    assert len(countries) == len(FALLBACK_COUNTRIES)
    usa = client.get("/api/countries/code/us").json()
    assert usa["capital"] == "Washington, D.C."
    assert usa["flag"] == "🇺🇸"
    assert usa["startOfWeek"] == "sunday"


def test_initialize_falls_back_on_error_status(client, remote):
    remote.response = FakeResponse({"message": "down"}, status_code=503)
    assert client.get("/api/initialize").json()["source"] == "fallback"


def test_initialize_falls_back_on_unexpected_payload(client, remote):
    remote.response = FakeResponse({"status": 404, "message": "Not Found"})
    assert client.get("/api/initialize").json()["source"] == "fallback"


def test_initialize_is_noop_when_countries_exist(client, germany, remote):
    remote.error = AssertionError("restcountries must not be called")
    r = client.get("/api/initialize")
    assert r.status_code == 200
    assert r.json() == {
        "success": True,
        "message": "Countries data already initialized",
        "source": "existing",
        "created": 0,
    }
    assert remote.calls == []


def test_initialize_twice_does_not_duplicate(client, remote):
    remote.error = requests.Timeout("slow")
    client.get("/api/initialize")
    client.get("/api/initialize")
    assert len(client.get("/api/countries").json()) == len(FALLBACK_COUNTRIES)


def test_initialize_failure_is_500(client, monkeypatch):
    async def broken(cls):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(CountryService, "count_countries", classmethod(broken))
    r = client.get("/api/initialize")
    assert r.status_code == 500
    assert r.json() == {"success": False, "message": "Failed to initialize countries data"}


def test_fetch_remote_countries_rejects_non_list(remote):
    remote.response = FakeResponse({"countries": []})
    with pytest.raises(ValueError):
        SeedService.fetch_remote_countries()


def test_fallback_countries_have_unique_codes():
    alpha2 = [c["cca2"] for c in FALLBACK_COUNTRIES]
    alpha3 = [c["cca3"] for c in FALLBACK_COUNTRIES]
    assert len(set(alpha2)) == len(alpha2)
    assert len(set(alpha3)) == len(alpha3)


def test_map_restcountries_record():
    country = map_restcountries_record(dict(ICELAND, unMember=True, borders=[]))
    assert country.name == "Iceland"
    assert country.alpha2_code == "IS"
    assert country.un_member is True
    assert country.independent is None
    assert country.borders is None
    assert country.population == 366425


def test_seeded_membership_flags_stay_unknown(client, remote):
    remote.response = FakeResponse([ICELAND])
    client.get("/api/initialize")
    country = client.get("/api/countries/code/IS").json()
    assert country["independent"] is None
    assert country["unMember"] is None
