"""
Timeline endpoints for API v1.

Mounted under ``/countries/{country_id}/timeline``.  Events are
returned in creation order; clients sort them by ``date`` for display
since the date is free text.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from country_atlas_api.app.api.v1.dependencies import CountryId, RecordId, get_country_or_404
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.schemas.timeline import (
    TimelineEventCreate,
    TimelineEventRead,
    TimelineEventUpdate,
)
from country_atlas_api.app.services.timeline_service import TimelineService

router = APIRouter()

NOT_FOUND = "Timeline event not found"


@router.get("", response_model=List[TimelineEventRead])
async def list_timeline_events(country_id: CountryId) -> List[TimelineEventRead]:
    """Return the timeline of a country (empty for unknown countries)."""
    return await TimelineService.list_for_country(country_id)


@router.post("", response_model=TimelineEventRead, status_code=status.HTTP_201_CREATED)
async def create_timeline_event(
    event_in: TimelineEventCreate,
    country: CountryRead = Depends(get_country_or_404),
) -> TimelineEventRead:
    """Add an event to a country's timeline.

    ``countryId`` always comes from the path; a value in the body is
    ignored.  Returns 404 if the country does not exist.
    """
    return await TimelineService.create(country.id, event_in)


@router.get("/{event_id}", response_model=TimelineEventRead)
async def get_timeline_event(country_id: CountryId, event_id: RecordId) -> TimelineEventRead:
    event = await TimelineService.get(event_id, country_id=country_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return event


@router.patch("/{event_id}", response_model=TimelineEventRead)
async def update_timeline_event(
    country_id: CountryId,
    event_id: RecordId,
    event_in: TimelineEventUpdate,
) -> TimelineEventRead:
    """Partially update a timeline event."""
    try:
        event = await TimelineService.update(event_id, event_in, country_id=country_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_timeline_event(country_id: CountryId, event_id: RecordId) -> None:
    deleted = await TimelineService.delete(event_id, country_id=country_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
