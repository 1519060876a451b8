"""Service layer for historical laws."""

from country_atlas_api.app.schemas.law import HistoricalLawRead
from country_atlas_api.app.services.base import CountryRecordService


class LawService(CountryRecordService):
    table = "historical_laws"
    object_type = "historical law"
    columns = ("title", "description", "date", "category", "status")
    required_columns = frozenset({"title"})
    read_schema = HistoricalLawRead
