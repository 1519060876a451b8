"""
Service layer for economic data.

Like the political system, economic data is one record per country in
practice; ``get_for_country`` returns the oldest one.
"""

from country_atlas_api.app.schemas.economy import EconomicDataRead
from country_atlas_api.app.services.base import CountryRecordService


class EconomyService(CountryRecordService):
    """CRUD for ``economic_data``."""

    table = "economic_data"
    object_type = "economic data"
    columns = (
        "gdp",
        "gdp_per_capita",
        "gdp_growth",
        "inflation",
        "main_industries",
        "trading_partners",
        "challenges",
        "reforms",
        "outlook",
        "initiatives",
    )
    json_columns = frozenset(
        {"main_industries", "trading_partners", "challenges", "reforms", "initiatives"}
    )
    read_schema = EconomicDataRead
