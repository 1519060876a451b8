"""
Shared base model for API schemas.

Clients exchange camelCase JSON (``countryId``, ``gdpPerCapita``).
``ApiModel`` generates those aliases from the snake_case attribute
names, accepts either spelling on input, and FastAPI serializes
responses by alias.

``SqliteInt`` is used for every integer written to an ``INTEGER``
column, so out-of-range numbers fail validation (400) instead of
reaching ``sqlite3``.
"""

from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1

SqliteInt = Annotated[int, Field(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]


class ApiModel(BaseModel):
    """Base class for every request and response schema."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class CountryRecordRead(ApiModel):
    """Fields shared by every record that belongs to a country."""

    id: int
    country_id: int
