"""
Historical law endpoints for API v1.

Mounted under ``/countries/{country_id}/laws``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from country_atlas_api.app.api.v1.dependencies import CountryId, RecordId, get_country_or_404
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.schemas.law import HistoricalLawCreate, HistoricalLawRead, HistoricalLawUpdate
from country_atlas_api.app.services.law_service import LawService

router = APIRouter()

NOT_FOUND = "Historical law not found"


@router.get("", response_model=List[HistoricalLawRead])
async def list_laws(country_id: CountryId) -> List[HistoricalLawRead]:
    return await LawService.list_for_country(country_id)


@router.post("", response_model=HistoricalLawRead, status_code=status.HTTP_201_CREATED)
async def create_law(
    law_in: HistoricalLawCreate,
    country: CountryRead = Depends(get_country_or_404),
) -> HistoricalLawRead:
    return await LawService.create(country.id, law_in)


@router.get("/{law_id}", response_model=HistoricalLawRead)
async def get_law(country_id: CountryId, law_id: RecordId) -> HistoricalLawRead:
    law = await LawService.get(law_id, country_id=country_id)
    if law is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return law


@router.patch("/{law_id}", response_model=HistoricalLawRead)
async def update_law(country_id: CountryId, law_id: RecordId, law_in: HistoricalLawUpdate) -> HistoricalLawRead:
    try:
        law = await LawService.update(law_id, law_in, country_id=country_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if law is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return law


@router.delete("/{law_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_law(country_id: CountryId, law_id: RecordId) -> None:
    deleted = await LawService.delete(law_id, country_id=country_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
