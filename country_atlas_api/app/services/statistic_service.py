"""
Service layer for statistics.

Statistics are typed data series (Population, GDP, Religion,
Ethnicity...).  Besides the country-scoped operations inherited from
``CountryRecordService``, listings can be narrowed to a single type.
"""

from typing import List, Optional

from country_atlas_api.app.core.db import get_cursor
from country_atlas_api.app.schemas.statistic import StatisticRead
from country_atlas_api.app.services.base import CountryRecordService


class StatisticService(CountryRecordService):
    """CRUD for ``statistics``.  ``data`` is stored as JSON."""

    table = "statistics"
    object_type = "statistic"
    columns = ("type", "data", "year")
    json_columns = frozenset({"data"})
    required_columns = frozenset({"type"})
    read_schema = StatisticRead

    @classmethod
    async def list_for_country(
        cls, country_id: int, stat_type: Optional[str] = None
    ) -> List[StatisticRead]:
        """Return the statistics of a country, optionally of one type.

        The type comparison is case-insensitive.
        """
        if stat_type is None:
            return await super().list_for_country(country_id)
        with get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT * FROM statistics WHERE country_id = ? AND LOWER(type) = LOWER(?) ORDER BY id ASC",
                (country_id, stat_type),
            ).fetchall()
            return [cls._row_to_read(row) for row in rows]
