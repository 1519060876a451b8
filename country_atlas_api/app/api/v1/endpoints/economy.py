"""
Economic data endpoints for API v1.

Mounted under ``/countries/{country_id}/economy``.  ``GET`` on the
collection path returns the country's economic data record (the
oldest one if several exist) or 404.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from country_atlas_api.app.api.v1.dependencies import CountryId, RecordId, get_country_or_404
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.schemas.economy import EconomicDataCreate, EconomicDataRead, EconomicDataUpdate
from country_atlas_api.app.services.economy_service import EconomyService

router = APIRouter()

NOT_FOUND = "Economic data not found for this country"


@router.get("", response_model=EconomicDataRead)
async def get_economic_data(country_id: CountryId) -> EconomicDataRead:
    economic_data = await EconomyService.get_for_country(country_id)
    if economic_data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return economic_data


@router.post("", response_model=EconomicDataRead, status_code=status.HTTP_201_CREATED)
async def create_economic_data(
    data_in: EconomicDataCreate,
    country: CountryRead = Depends(get_country_or_404),
) -> EconomicDataRead:
    """Store economic data for a country (404 if the country is unknown).

    Industries are ``{name, percentage}`` objects and challenges are
    ``{title, description, icon}`` objects.
    """
    return await EconomyService.create(country.id, data_in)


@router.get("/{data_id}", response_model=EconomicDataRead)
async def get_economic_data_by_id(country_id: CountryId, data_id: RecordId) -> EconomicDataRead:
    economic_data = await EconomyService.get(data_id, country_id=country_id)
    if economic_data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return economic_data


@router.patch("/{data_id}", response_model=EconomicDataRead)
async def update_economic_data(
    country_id: CountryId,
    data_id: RecordId,
    data_in: EconomicDataUpdate,
) -> EconomicDataRead:
    economic_data = await EconomyService.update(data_id, data_in, country_id=country_id)
    if economic_data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return economic_data


@router.delete("/{data_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_economic_data(country_id: CountryId, data_id: RecordId) -> None:
    deleted = await EconomyService.delete(data_id, country_id=country_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
