"""
Political system endpoints for API v1.

Mounted under ``/countries/{country_id}/political-system``.  A country
has one political system in practice: ``GET`` and ``PATCH`` on the
collection path address the oldest record, while the ``/{system_id}``
routes address a specific one.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from country_atlas_api.app.api.v1.dependencies import CountryId, RecordId, get_country_or_404
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.schemas.political_system import (
    PoliticalSystemCreate,
    PoliticalSystemRead,
    PoliticalSystemUpdate,
)
from country_atlas_api.app.services.political_system_service import PoliticalSystemService

router = APIRouter()

NOT_FOUND = "Political system not found for this country"


@router.get("", response_model=PoliticalSystemRead)
async def get_political_system(country_id: CountryId) -> PoliticalSystemRead:
    """Return the country's political system or 404."""
    system = await PoliticalSystemService.get_for_country(country_id)
    if system is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return system


@router.post("", response_model=PoliticalSystemRead, status_code=status.HTTP_201_CREATED)
async def create_political_system(
    system_in: PoliticalSystemCreate,
    country: CountryRead = Depends(get_country_or_404),
) -> PoliticalSystemRead:
    return await PoliticalSystemService.create(country.id, system_in)


@router.patch("", response_model=PoliticalSystemRead)
async def update_country_political_system(
    country_id: CountryId,
    system_in: PoliticalSystemUpdate,
) -> PoliticalSystemRead:
    """Partially update the country's political system without knowing its id."""
    system = await PoliticalSystemService.get_for_country(country_id)
    if system is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return await update_political_system(country_id, system.id, system_in)


@router.get("/{system_id}", response_model=PoliticalSystemRead)
async def get_political_system_by_id(country_id: CountryId, system_id: RecordId) -> PoliticalSystemRead:
    system = await PoliticalSystemService.get(system_id, country_id=country_id)
    if system is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return system


@router.patch("/{system_id}", response_model=PoliticalSystemRead)
async def update_political_system(
    country_id: CountryId,
    system_id: RecordId,
    system_in: PoliticalSystemUpdate,
) -> PoliticalSystemRead:
    try:
        system = await PoliticalSystemService.update(system_id, system_in, country_id=country_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if system is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return system


@router.delete("/{system_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_political_system(country_id: CountryId, system_id: RecordId) -> None:
    deleted = await PoliticalSystemService.delete(system_id, country_id=country_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
