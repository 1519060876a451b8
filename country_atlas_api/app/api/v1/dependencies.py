"""Shared FastAPI dependencies and path parameter types for v1 endpoints."""

from typing import Annotated

from fastapi import HTTPException, Path, status

from country_atlas_api.app.schemas.base import SQLITE_INTEGER_MAX
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.services.country_service import CountryService

# Ids are SQLite rowids: positive and 64-bit.
CountryId = Annotated[int, Path(ge=1, le=SQLITE_INTEGER_MAX, description="Id of the owning country")]
RecordId = Annotated[int, Path(ge=1, le=SQLITE_INTEGER_MAX)]


async def get_country_or_404(country_id: CountryId) -> CountryRead:
    """Resolve ``country_id`` from the path or answer 404.

    Records must reference an existing country when they are created;
    the store itself does not check it.
    """
    country = await CountryService.get_country(country_id)
    if country is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Country not found")
    return country
