from tests.conftest import FRANCE, GERMANY


def test_list_countries_empty(client):
    r = client.get("/api/countries")
    assert r.status_code == 200
    assert r.json() == []


def test_create_country_round_trips_fields(client):
    r = client.post("/api/countries", json=GERMANY)
    assert r.status_code == 201, r.text
    data = r.json()
    assert data["id"] == 1
    assert data["name"] == "Germany"
    assert data["alpha2Code"] == "DE"
    assert data["alpha3Code"] == "DEU"
    assert data["unMember"] is True
    assert data["borders"] == ["AUT", "BEL", "FRA", "POL"]
    assert data["currencies"] == {"EUR": {"name": "Euro", "symbol": "€"}}
    assert data["area"] == 357114
    assert data["countryInfo"]["governmentForm"] == "Federal parliamentary republic"
    assert data["coatOfArmsUrl"] is None


def test_create_country_accepts_snake_case(client):
    r = client.post(
        "/api/countries",
        json={"name": "Japan", "alpha2_code": "JP", "alpha3_code": "JPN", "start_of_week": "monday"},
    )
    assert r.status_code == 201, r.text
    assert r.json()["startOfWeek"] == "monday"


def test_country_info_keeps_extra_keys(client):
    payload = dict(FRANCE, countryInfo={"governmentForm": "Republic", "headOfState": "President"})
    r = client.post("/api/countries", json=payload)
    assert r.status_code == 201, r.text
    info = r.json()["countryInfo"]
    assert info["governmentForm"] == "Republic"
    assert info["headOfState"] == "President"


def test_create_country_missing_code_is_400(client):
    r = client.post("/api/countries", json={"name": "Nowhere", "alpha2Code": "NW"})
    assert r.status_code == 400
    body = r.json()
    assert "alpha3Code" in body["message"]
    assert any(e["field"].endswith("alpha3Code") for e in body["errors"])


def test_list_countries_in_insertion_order(client, germany, france):
    r = client.get("/api/countries")
    assert [c["alpha2Code"] for c in r.json()] == ["DE", "FR"]


def test_get_country_by_id(client, germany):
    r = client.get(f"/api/countries/{germany['id']}")
    assert r.status_code == 200
    assert r.json()["name"] == "Germany"


def test_get_country_by_id_not_found(client):
    r = client.get("/api/countries/999")
    assert r.status_code == 404
    assert r.json() == {"message": "Country not found"}


def test_get_country_by_id_rejects_non_integer(client):
    r = client.get("/api/countries/abc")
    assert r.status_code == 400


def test_get_country_by_code_matches_alpha2_and_alpha3(client, germany):
    for code in ("DE", "DEU", "de", "deu"):
        r = client.get(f"/api/countries/code/{code}")
        assert r.status_code == 200, code
        assert r.json()["id"] == germany["id"]


def test_get_country_by_code_not_found(client, germany):
    r = client.get("/api/countries/code/XX")
    assert r.status_code == 404
    assert r.json()["message"] == "Country not found"


def test_list_countries_by_region(client, germany, france):
    client.post("/api/countries", json={"name": "Japan", "alpha2Code": "JP", "alpha3Code": "JPN", "region": "Asia"})
    r = client.get("/api/countries/region/europe")
    assert r.status_code == 200
    assert [c["name"] for c in r.json()] == ["Germany", "France"]


def test_patch_country_merges_fields(client, germany):
    r = client.patch(
        f"/api/countries/{germany['id']}",
        json={"capital": "Bonn", "countryInfo": {"governmentForm": "Federal republic"}},
    )
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["capital"] == "Bonn"
    assert data["countryInfo"]["governmentForm"] == "Federal republic"
    # untouched fields survive
    assert data["name"] == "Germany"
    assert data["borders"] == GERMANY["borders"]
    assert client.get(f"/api/countries/{germany['id']}").json()["capital"] == "Bonn"


def test_patch_country_null_clears_optional_field(client, germany):
    r = client.patch(f"/api/countries/{germany['id']}", json={"subregion": None})
    assert r.status_code == 200
    assert r.json()["subregion"] is None


def test_patch_country_null_name_is_400(client, germany):
    r = client.patch(f"/api/countries/{germany['id']}", json={"name": None})
    assert r.status_code == 400
    assert r.json()["message"] == "name cannot be null"


def test_patch_country_wrong_type_is_400(client, germany):
    r = client.patch(f"/api/countries/{germany['id']}", json={"population": "lots"})
    assert r.status_code == 400


def test_patch_country_not_found(client):
    r = client.patch("/api/countries/42", json={"capital": "Atlantis"})
    assert r.status_code == 404


def test_delete_country_keeps_children(client, germany):
    cid = germany["id"]
    r = client.post(
        f"/api/countries/{cid}/timeline",
        json={"title": "Reunification", "description": "East and West reunite.", "date": "1990-10-03", "eventType": "agreement"},
    )
    assert r.status_code == 201

    r = client.delete(f"/api/countries/{cid}")
    assert r.status_code == 204
    assert client.get(f"/api/countries/{cid}").status_code == 404

    events = client.get(f"/api/countries/{cid}/timeline").json()
    assert [e["title"] for e in events] == ["Reunification"]


def test_delete_country_not_found(client):
    r = client.delete("/api/countries/7")
    assert r.status_code == 404


def test_duplicate_codes_are_allowed_on_create(client, germany):
    r = client.post("/api/countries", json=GERMANY)
    assert r.status_code == 201
    assert r.json()["id"] == germany["id"] + 1
    # lookup by code returns the oldest
    assert client.get("/api/countries/code/DE").json()["id"] == germany["id"]


def test_country_ids_outside_sqlite_range_are_400(client):
    for method in ("get", "delete"):
        r = getattr(client, method)("/api/countries/99999999999999999999")
        assert r.status_code == 400
    r = client.patch("/api/countries/99999999999999999999", json={"capital": "X"})
    assert r.status_code == 400
    assert client.get("/api/countries/-1").status_code == 400


def test_population_outside_sqlite_range_is_400(client, germany):
    r = client.post("/api/countries", json=dict(FRANCE, population=10**20))
    assert r.status_code == 400
    assert any(e["field"].endswith("population") for e in r.json()["errors"])
    r = client.patch(f"/api/countries/{germany['id']}", json={"population": 10**20})
    assert r.status_code == 400


def test_region_named_like_a_record_collection(client):
    client.post(
        "/api/countries",
        json={"name": "Oddland", "alpha2Code": "OD", "alpha3Code": "ODD", "region": "Economy"},
    )
    for region in ("economy", "timeline", "laws"):
        r = client.get(f"/api/countries/region/{region}")
        assert r.status_code == 200
    assert [c["name"] for c in client.get("/api/countries/region/economy").json()] == ["Oddland"]
