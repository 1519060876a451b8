"""Service layer for political leaders."""

from country_atlas_api.app.schemas.leader import PoliticalLeaderRead
from country_atlas_api.app.services.base import CountryRecordService


class LeaderService(CountryRecordService):
    """CRUD for ``political_leaders``.  ``ideologies`` is stored as JSON."""

    table = "political_leaders"
    object_type = "political leader"
    columns = ("name", "title", "party", "image_url", "start_date", "ideologies")
    json_columns = frozenset({"ideologies"})
    required_columns = frozenset({"name", "title"})
    read_schema = PoliticalLeaderRead
