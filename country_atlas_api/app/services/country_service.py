"""
Service layer for countries.

Countries are the root records of the store.  Lookups by ISO code
accept either the alpha-2 or the alpha-3 code, in any letter case.
Codes are not unique at the storage level; ``deduplicate_countries``
removes later copies of an already known code, which is how
duplicates created by repeated seeding are cleaned up.

Deleting a country does not touch the records that reference it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from country_atlas_api.app.core.db import get_cursor
from country_atlas_api.app.schemas.country import CountryCreate, CountryRead, CountryUpdate
from country_atlas_api.app.services.base import RowCodec

COLUMNS = (
    "name",
    "alpha2_code",
    "alpha3_code",
    "capital",
    "region",
    "subregion",
    "population",
    "area",
    "flag_url",
    "coat_of_arms_url",
    "map_url",
    "independent",
    "un_member",
    "currencies",
    "languages",
    "borders",
    "timezones",
    "start_of_week",
    "capital_info",
    "postal_code",
    "flag",
    "country_info",
)
JSON_COLUMNS = frozenset(
    {"currencies", "languages", "borders", "timezones", "capital_info", "postal_code", "country_info"}
)
BOOL_COLUMNS = frozenset({"independent", "un_member"})
REQUIRED_COLUMNS = frozenset({"name", "alpha2_code", "alpha3_code"})


class CountryService(RowCodec):
    """Service class for managing countries."""

    table = "countries"
    object_type = "country"
    columns = COLUMNS
    json_columns = JSON_COLUMNS
    bool_columns = BOOL_COLUMNS
    required_columns = REQUIRED_COLUMNS
    read_schema = CountryRead

    @classmethod
    async def list_countries(cls) -> List[CountryRead]:
        """Return all countries in insertion order."""
        with get_cursor() as cursor:
            rows = cursor.execute("SELECT * FROM countries ORDER BY id ASC").fetchall()
            return [cls._row_to_read(row) for row in rows]

    @classmethod
    async def list_by_region(cls, region: str) -> List[CountryRead]:
        """Return the countries of ``region`` (case-insensitive)."""
        with get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT * FROM countries WHERE LOWER(region) = LOWER(?) ORDER BY id ASC",
                (region,),
            ).fetchall()
            return [cls._row_to_read(row) for row in rows]

    @classmethod
    async def count_countries(cls) -> int:
        with get_cursor() as cursor:
            return cursor.execute("SELECT COUNT(*) FROM countries").fetchone()[0]

    @classmethod
    async def get_country(cls, country_id: int) -> Optional[CountryRead]:
        """Retrieve a single country by its id."""
        with get_cursor() as cursor:
            row = cursor.execute("SELECT * FROM countries WHERE id = ?", (country_id,)).fetchone()
            return cls._row_to_read(row) if row else None

    @classmethod
    async def get_country_by_code(cls, code: str) -> Optional[CountryRead]:
        """Retrieve a country by alpha-2 or alpha-3 code.

        If several countries share the code, the oldest one wins.
        """
        code = code.strip().upper()
        with get_cursor() as cursor:
            row = cursor.execute(
                """
                SELECT * FROM countries
                WHERE UPPER(alpha2_code) = ? OR UPPER(alpha3_code) = ?
                ORDER BY id ASC LIMIT 1
                """,
                (code, code),
            ).fetchone()
            return cls._row_to_read(row) if row else None

    @classmethod
    async def list_codes(cls) -> Set[str]:
        """Return every alpha-2 and alpha-3 code in the store, upper-cased."""
        with get_cursor() as cursor:
            rows = cursor.execute("SELECT alpha2_code, alpha3_code FROM countries").fetchall()
        codes: Set[str] = set()
        for row in rows:
            codes.add(row["alpha2_code"].upper())
            codes.add(row["alpha3_code"].upper())
        return codes

    @classmethod
    async def create_country(cls, data: CountryCreate) -> CountryRead:
        """Insert a new country and return the created record.

        Code uniqueness is not enforced here.
        """
        logger = logging.getLogger(__name__)
        values = [cls._to_column(column, getattr(data, column)) for column in COLUMNS]
        placeholders = ", ".join("?" for _ in COLUMNS)
        with get_cursor() as cursor:
            cursor.execute(
                f"INSERT INTO countries ({', '.join(COLUMNS)}) VALUES ({placeholders})",
                values,
            )
            country_id = cursor.lastrowid
            logger.info("Created country %s (%s)", country_id, data.alpha3_code)
            row = cursor.execute("SELECT * FROM countries WHERE id = ?", (country_id,)).fetchone()
            return cls._row_to_read(row)

    @classmethod
    async def update_country(cls, country_id: int, data: CountryUpdate) -> Optional[CountryRead]:
        """Merge the provided fields into an existing country.

        Returns the updated country or ``None`` if it does not exist.
        Raises ``ValueError`` if ``name`` or a code is set to ``null``.
        """
        provided = cls._provided_columns(data)
        with get_cursor() as cursor:
            row = cursor.execute("SELECT id FROM countries WHERE id = ?", (country_id,)).fetchone()
            if not row:
                return None
            cls._write_columns(cursor, country_id, data, provided)
            row = cursor.execute("SELECT * FROM countries WHERE id = ?", (country_id,)).fetchone()
            return cls._row_to_read(row)

    @classmethod
    async def delete_country(cls, country_id: int) -> bool:
        """Delete a country by id; its child records are left in place."""
        logger = logging.getLogger(__name__)
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM countries WHERE id = ?", (country_id,))
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted country %s", country_id)
        return affected > 0

    @classmethod
    async def deduplicate_countries(cls) -> int:
        """Remove countries whose code already appeared on an older country.

        Countries are scanned in id order; a country is dropped when
        either its alpha-2 or its alpha-3 code was seen before.  Returns
        the number of countries removed.
        """
        logger = logging.getLogger(__name__)
        seen: Set[str] = set()
        duplicates: List[int] = []
        with get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, alpha2_code, alpha3_code FROM countries ORDER BY id ASC"
            ).fetchall()
            for row in rows:
                codes = {row["alpha2_code"].upper(), row["alpha3_code"].upper()}
                if codes & seen:
                    duplicates.append(row["id"])
                else:
                    seen.update(codes)
            cursor.executemany("DELETE FROM countries WHERE id = ?", [(i,) for i in duplicates])
        if duplicates:
            logger.info("Removed %s duplicate countries: %s", len(duplicates), duplicates)
        return len(duplicates)
