"""
Political leader endpoints for API v1.

Mounted under ``/countries/{country_id}/leaders``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from country_atlas_api.app.api.v1.dependencies import CountryId, RecordId, get_country_or_404
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.schemas.leader import (
    PoliticalLeaderCreate,
    PoliticalLeaderRead,
    PoliticalLeaderUpdate,
)
from country_atlas_api.app.services.leader_service import LeaderService

router = APIRouter()

NOT_FOUND = "Political leader not found"


@router.get("", response_model=List[PoliticalLeaderRead])
async def list_leaders(country_id: CountryId) -> List[PoliticalLeaderRead]:
    return await LeaderService.list_for_country(country_id)


@router.post("", response_model=PoliticalLeaderRead, status_code=status.HTTP_201_CREATED)
async def create_leader(
    leader_in: PoliticalLeaderCreate,
    country: CountryRead = Depends(get_country_or_404),
) -> PoliticalLeaderRead:
    """Add a political leader to a country (404 if the country is unknown)."""
    return await LeaderService.create(country.id, leader_in)


@router.get("/{leader_id}", response_model=PoliticalLeaderRead)
async def get_leader(country_id: CountryId, leader_id: RecordId) -> PoliticalLeaderRead:
    leader = await LeaderService.get(leader_id, country_id=country_id)
    if leader is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return leader


@router.patch("/{leader_id}", response_model=PoliticalLeaderRead)
async def update_leader(
    country_id: CountryId,
    leader_id: RecordId,
    leader_in: PoliticalLeaderUpdate,
) -> PoliticalLeaderRead:
    try:
        leader = await LeaderService.update(leader_id, leader_in, country_id=country_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if leader is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return leader


@router.delete("/{leader_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_leader(country_id: CountryId, leader_id: RecordId) -> None:
    deleted = await LeaderService.delete(leader_id, country_id=country_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
