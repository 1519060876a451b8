SYSTEM = {
    "type": "Federal parliamentary republic",
    "details": "Bundestag and Bundesrat",
    "freedomIndex": 94,
    "electionSystem": "Mixed-member proportional",
    "governmentBranches": [{"name": "Executive", "head": "Chancellor"}],
    "democraticPrinciples": ["Rule of law", "Separation of powers"],
    "organizations": ["EU", "NATO", "UN"],
}


def test_get_missing_political_system_is_404(client, germany):
    r = client.get(f"/api/countries/{germany['id']}/political-system")
    assert r.status_code == 404
    assert r.json() == {"message": "Political system not found for this country"}


def test_create_and_get_political_system(client, germany):
    base = f"/api/countries/{germany['id']}/political-system"
    r = client.post(base, json=SYSTEM)
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["hasUnstablePoliticalSituation"] is False
    assert created["governmentBranches"] == SYSTEM["governmentBranches"]
    assert created["ongoingConflicts"] is None

    r = client.get(base)
    assert r.status_code == 200
    assert r.json() == created


def test_get_returns_oldest_system(client, germany):
    base = f"/api/countries/{germany['id']}/political-system"
    first = client.post(base, json=SYSTEM).json()
    client.post(base, json=dict(SYSTEM, type="Monarchy"))
    assert client.get(base).json()["id"] == first["id"]


def test_freedom_index_range_is_validated(client, germany):
    base = f"/api/countries/{germany['id']}/political-system"
    assert client.post(base, json=dict(SYSTEM, freedomIndex=101)).status_code == 400
    assert client.post(base, json=dict(SYSTEM, freedomIndex=-1)).status_code == 400


def test_patch_without_id(client, germany):
    base = f"/api/countries/{germany['id']}/political-system"
    client.post(base, json=SYSTEM)
    r = client.patch(
        base,
        json={"hasUnstablePoliticalSituation": True, "ongoingConflicts": ["Border dispute"]},
    )
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["hasUnstablePoliticalSituation"] is True
    assert data["ongoingConflicts"] == ["Border dispute"]
    assert data["freedomIndex"] == 94


def test_patch_without_id_when_missing_is_404(client, germany):
    r = client.patch(f"/api/countries/{germany['id']}/political-system", json={"details": "x"})
    assert r.status_code == 404


def test_patch_by_id_and_delete(client, germany):
    base = f"/api/countries/{germany['id']}/political-system"
    system = client.post(base, json=SYSTEM).json()

    r = client.patch(f"{base}/{system['id']}", json={"freedomIndex": 90})
    assert r.status_code == 200
    assert r.json()["freedomIndex"] == 90

    r = client.patch(f"{base}/{system['id']}", json={"type": None})
    assert r.status_code == 400
    assert r.json()["message"] == "type cannot be null"

    assert client.delete(f"{base}/{system['id']}").status_code == 204
    assert client.get(base).status_code == 404
    assert client.delete(f"{base}/{system['id']}").status_code == 404


def test_create_for_unknown_country_is_404(client):
    r = client.post("/api/countries/5/political-system", json=SYSTEM)
    assert r.status_code == 404
    assert r.json()["message"] == "Country not found"
