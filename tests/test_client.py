import json

import pytest
import requests

from country_atlas_client import CountryAtlasAPI


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        if payload is not None:
            self.content = json.dumps(payload).encode()
        else:
            self.content = (text or "").encode()
        self.text = self.content.decode()

    def json(self):
        return json.loads(self.content)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_api(*responses):
    session = FakeSession(*responses)
    return CountryAtlasAPI(base_url="http://atlas.local/", timeout=3, session=session), session


def test_list_countries():
    api, session = make_api(FakeResponse(payload=[{"id": 1, "name": "Germany"}]))
    countries, error = api.list_countries()
    assert error is None
    assert countries == [{"id": 1, "name": "Germany"}]
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://atlas.local/api/countries"
    assert session.calls[0]["timeout"] == 3


def test_list_countries_by_region():
    api, session = make_api(FakeResponse(payload=[]))
    api.list_countries(region="Europe")
    assert session.calls[0]["url"] == "http://atlas.local/api/countries/region/Europe"


def test_http_error_reads_message():
    api, _ = make_api(FakeResponse(404, payload={"message": "Country not found"}))
    country, error = api.get_country_by_code("XX")
    assert country is None
    assert error == {"status_code": 404, "message": "Country not found"}


def test_http_error_with_plain_text_body():
    api, _ = make_api(FakeResponse(502, text="Bad gateway"))
    _, error = api.get_country(1)
    assert error == {"status_code": 502, "message": "Bad gateway"}


def test_connection_error_has_no_status():
    api, _ = make_api(requests.ConnectionError("refused"))
    countries, error = api.list_countries()
    assert countries == []
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_create_record_posts_to_nested_path():
    api, session = make_api(FakeResponse(201, payload={"id": 4, "countryId": 2, "title": "Basic Law"}))
    law, error = api.create_record(2, "laws", {"title": "Basic Law"})
    assert error is None
    assert law["id"] == 4
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://atlas.local/api/countries/2/laws"
    assert call["json"] == {"title": "Basic Law"}


def test_list_records_with_filter():
    api, session = make_api(FakeResponse(payload=[]))
    api.list_records(2, "statistics", params={"type": "Religion"})
    assert session.calls[0]["params"] == {"type": "Religion"}


def test_missing_single_record_resource_returns_none():
    api, _ = make_api(FakeResponse(404, payload={"message": "Economic data not found for this country"}))
    economy, error = api.list_records(2, "economy")
    assert economy is None
    assert error["status_code"] == 404


def test_failed_list_resource_returns_empty_list():
    api, _ = make_api(FakeResponse(500, payload={"message": "An unexpected error occurred"}))
    events, error = api.list_records(2, "timeline")
    assert events == []
    assert error["message"] == "An unexpected error occurred"


def test_delete_record_with_empty_body():
    api, session = make_api(FakeResponse(204))
    ok, error = api.delete_record(2, "parties", 9)
    assert ok is True
    assert error is None
    assert session.calls[0]["url"] == "http://atlas.local/api/countries/2/parties/9"


def test_delete_country_failure():
    api, _ = make_api(FakeResponse(404, payload={"message": "Country not found"}))
    ok, error = api.delete_country(99)
    assert ok is False
    assert error["status_code"] == 404


def test_update_statistic_by_id():
    api, session = make_api(FakeResponse(payload={"id": 3, "year": 2022}))
    stat, _ = api.update_statistic(3, {"year": 2022})
    assert stat["year"] == 2022
    assert session.calls[0]["method"] == "PATCH"
    assert session.calls[0]["url"] == "http://atlas.local/api/statistics/3"


def test_unknown_resource_is_rejected():
    api, session = make_api()
    with pytest.raises(ValueError):
        api.list_records(1, "weather")
    assert session.calls == []


def test_maintenance_paths():
    api, session = make_api(
        FakeResponse(payload={"success": True}),
        FakeResponse(payload={"success": True}),
        FakeResponse(payload={"success": True, "removed": 0}),
    )
    api.initialize()
    api.reset()
    api.deduplicate_countries()
    assert [(c["method"], c["url"]) for c in session.calls] == [
        ("GET", "http://atlas.local/api/initialize"),
        ("POST", "http://atlas.local/api/debug/reset"),
        ("POST", "http://atlas.local/api/debug/deduplicate-countries"),
    ]
