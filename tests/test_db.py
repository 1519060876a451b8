import asyncio

import pytest

from country_atlas_api.app.core import db
from country_atlas_api.app.schemas.country import CountryCreate, CountryUpdate
from country_atlas_api.app.schemas.party import PoliticalPartyCreate, PoliticalPartyUpdate
from country_atlas_api.app.schemas.timeline import TimelineEventCreate, TimelineEventUpdate
from country_atlas_api.app.services.country_service import CountryService
from country_atlas_api.app.services.party_service import PartyService
from country_atlas_api.app.services.timeline_service import TimelineService


def test_encode_and_decode_json():
    assert db.encode_json(None) is None
    assert db.decode_json(db.encode_json({"EUR": {"name": "Euro"}})) == {"EUR": {"name": "Euro"}}
    assert db.decode_json(None) is None
    assert db.decode_json("") is None
    assert db.decode_json("{broken") is None


def test_migrations_are_recorded():
    with db.get_cursor() as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations ORDER BY version")]
    assert versions == [version for version, _ in db.MIGRATIONS]


def test_init_db_is_idempotent():
    db.init_db()
    db.init_db()
    with db.get_cursor() as cursor:
        count = cursor.execute("SELECT COUNT(*) AS n FROM migrations").fetchone()["n"]
    assert count == len(db.MIGRATIONS)


def test_failed_write_is_rolled_back():
    with pytest.raises(RuntimeError):
        with db.get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO countries (name, alpha2_code, alpha3_code) VALUES ('X', 'XX', 'XXX')"
            )
            raise RuntimeError("abort")
    assert asyncio.run(CountryService.count_countries()) == 0


def test_services_store_json_and_bool_columns():
    country = asyncio.run(
        CountryService.create_country(
            CountryCreate(name="Chile", alpha2_code="CL", alpha3_code="CHL", independent=True, timezones=["UTC-04:00"])
        )
    )
    assert country.independent is True
    assert country.timezones == ["UTC-04:00"]

    event = asyncio.run(
        TimelineService.create(
            country.id,
            TimelineEventCreate(title="Plebiscite", description="", date="1988", event_type="election", tags=["vote"]),
        )
    )
    assert event.tags == ["vote"]
    assert asyncio.run(TimelineService.get(event.id, country_id=country.id + 1)) is None


def test_service_update_rejects_null_required_field():
    country = asyncio.run(
        CountryService.create_country(CountryCreate(name="Peru", alpha2_code="PE", alpha3_code="PER"))
    )
    with pytest.raises(ValueError, match="alpha3Code cannot be null"):
        asyncio.run(CountryService.update_country(country.id, CountryUpdate(alpha3_code=None)))

    event = asyncio.run(
        TimelineService.create(
            country.id, TimelineEventCreate(title="Independence", description="", date="1821", event_type="war")
        )
    )
    with pytest.raises(ValueError, match="eventType cannot be null"):
        asyncio.run(TimelineService.update(event.id, TimelineEventUpdate(event_type=None)))


def test_update_missing_record_returns_none():
    assert asyncio.run(CountryService.update_country(404, CountryUpdate(capital="Nowhere"))) is None
    assert asyncio.run(TimelineService.update(404, TimelineEventUpdate(title="Nothing"))) is None
    assert asyncio.run(TimelineService.delete(404)) is False


def test_party_service_checks_seats_against_stored_total():
    party = asyncio.run(
        PartyService.create(1, PoliticalPartyCreate(name="Greens", seats=20, total_seats=100))
    )
    with pytest.raises(ValueError, match="seats cannot exceed totalSeats"):
        asyncio.run(PartyService.update(party.id, PoliticalPartyUpdate(seats=101)))
    updated = asyncio.run(PartyService.update(party.id, PoliticalPartyUpdate(seats=100)))
    assert updated.seats == 100


def test_country_service_shares_column_codec():
    assert CountryService._to_column("borders", ["FRA"]) == '["FRA"]'
    assert CountryService._to_column("un_member", False) == 0
    assert CountryService._public_name("alpha2_code") == "alpha2Code"
