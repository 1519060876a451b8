"""Service layer for timeline events."""

from country_atlas_api.app.schemas.timeline import TimelineEventRead
from country_atlas_api.app.services.base import CountryRecordService


class TimelineService(CountryRecordService):
    """CRUD for ``timeline_events``."""

    table = "timeline_events"
    object_type = "timeline event"
    columns = ("title", "description", "date", "event_type", "icon", "tags")
    json_columns = frozenset({"tags"})
    required_columns = frozenset({"title", "description", "date", "event_type"})
    read_schema = TimelineEventRead
