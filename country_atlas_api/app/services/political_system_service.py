"""
Service layer for political systems.

A country is expected to have a single political system; the oldest
record is the one returned by ``get_for_country``.  The list-valued
columns (branches, principles, relations, laws, organisations,
conflicts) are stored as JSON.
"""

from country_atlas_api.app.schemas.political_system import PoliticalSystemRead
from country_atlas_api.app.services.base import CountryRecordService


class PoliticalSystemService(CountryRecordService):
    """CRUD for ``political_systems``."""

    table = "political_systems"
    object_type = "political system"
    columns = (
        "type",
        "details",
        "freedom_index",
        "election_system",
        "government_branches",
        "democratic_principles",
        "international_relations",
        "laws",
        "organizations",
        "has_unstable_political_situation",
        "ongoing_conflicts",
    )
    json_columns = frozenset(
        {
            "government_branches",
            "democratic_principles",
            "international_relations",
            "laws",
            "organizations",
            "ongoing_conflicts",
        }
    )
    bool_columns = frozenset({"has_unstable_political_situation"})
    required_columns = frozenset({"type", "has_unstable_political_situation"})
    read_schema = PoliticalSystemRead
