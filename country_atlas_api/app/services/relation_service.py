"""Service layer for international relations."""

from country_atlas_api.app.schemas.relation import InternationalRelationRead
from country_atlas_api.app.services.base import CountryRecordService


class RelationService(CountryRecordService):
    table = "international_relations"
    object_type = "international relation"
    columns = (
        "partner_country",
        "relation_type",
        "relation_strength",
        "details",
        "start_date",
        "iso_code",
    )
    required_columns = frozenset({"partner_country", "relation_type"})
    read_schema = InternationalRelationRead
