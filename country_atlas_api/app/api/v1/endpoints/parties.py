"""
Political party endpoints for API v1.

Mounted under ``/countries/{country_id}/parties``.  Parties feed the
parliament composition chart, so ``seats`` may not exceed
``totalSeats``, on creation or after a partial update.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from country_atlas_api.app.api.v1.dependencies import CountryId, RecordId, get_country_or_404
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.schemas.party import (
    PoliticalPartyCreate,
    PoliticalPartyRead,
    PoliticalPartyUpdate,
)
from country_atlas_api.app.services.party_service import PartyService

router = APIRouter()

NOT_FOUND = "Political party not found"


@router.get("", response_model=List[PoliticalPartyRead])
async def list_parties(country_id: CountryId) -> List[PoliticalPartyRead]:
    return await PartyService.list_for_country(country_id)


@router.post("", response_model=PoliticalPartyRead, status_code=status.HTTP_201_CREATED)
async def create_party(
    party_in: PoliticalPartyCreate,
    country: CountryRead = Depends(get_country_or_404),
) -> PoliticalPartyRead:
    return await PartyService.create(country.id, party_in)


@router.get("/{party_id}", response_model=PoliticalPartyRead)
async def get_party(country_id: CountryId, party_id: RecordId) -> PoliticalPartyRead:
    party = await PartyService.get(party_id, country_id=country_id)
    if party is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return party


@router.patch("/{party_id}", response_model=PoliticalPartyRead)
async def update_party(
    country_id: CountryId,
    party_id: RecordId,
    party_in: PoliticalPartyUpdate,
) -> PoliticalPartyRead:
    """Partially update a party, e.g. its seat count after an election."""
    try:
        party = await PartyService.update(party_id, party_in, country_id=country_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if party is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return party


@router.delete("/{party_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_party(country_id: CountryId, party_id: RecordId) -> None:
    deleted = await PartyService.delete(party_id, country_id=country_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
