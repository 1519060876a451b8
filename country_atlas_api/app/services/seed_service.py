"""
Seeding of the country store.

``SeedService.initialize`` fills an empty store with countries.  It
makes one HTTP request to the restcountries API (with the configured
fixed timeout) and falls back to the built-in sample list when the
request fails, returns a non-2xx status or yields an unexpected
payload.  A store that already holds countries is left untouched.

Raw restcountries records are mapped to ``CountryCreate`` by
``map_restcountries_record``.  Records whose alpha-2 or alpha-3 code
is already known are skipped, so the API's occasional duplicates do
not end up in the store.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from country_atlas_api.app.core.config import settings
from country_atlas_api.app.schemas.country import CountryCreate
from country_atlas_api.app.services.country_service import CountryService
from country_atlas_api.app.services.fallback_countries import FALLBACK_COUNTRIES

logger = logging.getLogger(__name__)

SOURCE_EXISTING = "existing"
SOURCE_REMOTE = "restcountries"
SOURCE_FALLBACK = "fallback"


def _first(values: Any) -> Optional[Any]:
    if isinstance(values, list) and values:
        return values[0]
    return None


def _nested(record: Dict[str, Any], key: str, inner: str) -> Optional[Any]:
    value = record.get(key)
    if isinstance(value, dict):
        return value.get(inner)
    return None


def map_restcountries_record(record: Dict[str, Any]) -> CountryCreate:
    """Map a restcountries v3.1 record to a ``CountryCreate``.

    Raises ``ValueError`` (pydantic's ``ValidationError``) when the
    record lacks a name or valid codes.
    """
    name = _nested(record, "name", "common")
    capital = _first(record.get("capital"))
    region = record.get("region") or None
    subregion = record.get("subregion") or None
    population = record.get("population") or None
    return CountryCreate(
        name=name,
        alpha2_code=record.get("cca2"),
        alpha3_code=record.get("cca3"),
        capital=capital,
        region=region,
        subregion=subregion,
        population=population,
        area=record.get("area") or None,
        flag_url=_nested(record, "flags", "svg"),
        coat_of_arms_url=_nested(record, "coatOfArms", "svg"),
        map_url=_nested(record, "maps", "googleMaps"),
        # Missing keys stay None.
        independent=record.get("independent"),
        un_member=record.get("unMember"),
        currencies=record.get("currencies") or None,
        languages=record.get("languages") or None,
        borders=record.get("borders") or None,
        timezones=record.get("timezones") or None,
        start_of_week=record.get("startOfWeek") or None,
        capital_info=record.get("capitalInfo") or None,
        postal_code=record.get("postalCode") or None,
        flag=record.get("flag") or None,
        country_info={
            "capital": capital,
            "region": region,
            "subregion": subregion,
            "population": population,
            # Not provided by restcountries; filled in by editors.
            "government_form": None,
        },
    )


class SeedService:
    """Populate the store from restcountries or the sample list."""

    @classmethod
    def fetch_remote_countries(cls) -> List[Dict[str, Any]]:
        """Download all countries from restcountries.

        Raises ``requests.RequestException`` on transport errors and
        non-2xx responses, ``ValueError`` when the body is not a JSON
        list.
        """
        logger.info("Fetching countries from %s", settings.restcountries_url)
        response = requests.get(settings.restcountries_url, timeout=settings.restcountries_timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, list):
            raise ValueError("restcountries returned %s instead of a list" % type(data).__name__)
        return data

    @classmethod
    async def initialize(cls) -> Dict[str, Any]:
        """Seed the store if it holds no countries.

        Returns a summary with the data ``source`` and the number of
        countries ``created``.
        """
        if await CountryService.count_countries() > 0:
            logger.info("Countries already present; skipping initialization")
            return {
                "success": True,
                "message": "Countries data already initialized",
                "source": SOURCE_EXISTING,
                "created": 0,
            }

        try:
            # ``requests`` blocks; keep the event loop free while waiting.
            records = await asyncio.to_thread(cls.fetch_remote_countries)
            source = SOURCE_REMOTE
        except (requests.RequestException, ValueError) as exc:
            logger.warning("restcountries unavailable (%s); using built-in sample countries", exc)
            records = FALLBACK_COUNTRIES
            source = SOURCE_FALLBACK

        created = await cls.load_countries(records)
        logger.info("Initialized %s countries from %s", created, source)
        return {
            "success": True,
            "message": "Countries data initialized successfully",
            "source": source,
            "created": created,
        }

    @classmethod
    async def load_countries(cls, records: List[Dict[str, Any]]) -> int:
        """Insert mapped records whose codes are not yet in the store.

        Malformed records are skipped with a warning.  Returns the
        number of countries inserted.
        """
        known_codes = await CountryService.list_codes()
        created = 0
        for record in records:
            if not isinstance(record, dict):
                logger.warning("Skipping non-object country record %r", record)
                continue
            try:
                country = map_restcountries_record(record)
            except ValidationError as exc:
                logger.warning("Skipping malformed country record %r: %s", record.get("cca3"), exc)
                continue
            codes = {country.alpha2_code.upper(), country.alpha3_code.upper()}
            if codes & known_codes:
                logger.debug("Skipping duplicate country %s", country.alpha3_code)
                continue
            await CountryService.create_country(country)
            known_codes.update(codes)
            created += 1
        return created
