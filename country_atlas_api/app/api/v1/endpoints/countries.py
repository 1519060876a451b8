"""
Country endpoints for API v1.

Countries can be listed (all or per region), looked up by id or by
ISO alpha-2/alpha-3 code, created, partially updated and deleted.
Deleting a country keeps its timeline, leaders and other records.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from country_atlas_api.app.api.v1.dependencies import CountryId
from country_atlas_api.app.schemas.country import CountryCreate, CountryRead, CountryUpdate
from country_atlas_api.app.services.country_service import CountryService

router = APIRouter()


@router.get("", response_model=List[CountryRead])
async def list_countries() -> List[CountryRead]:
    """Return all countries in insertion order."""
    return await CountryService.list_countries()


@router.post("", response_model=CountryRead, status_code=status.HTTP_201_CREATED)
async def create_country(country_in: CountryCreate) -> CountryRead:
    """Create a country.  Codes are not checked for uniqueness."""
    return await CountryService.create_country(country_in)


@router.get("/region/{region}", response_model=List[CountryRead])
async def list_countries_by_region(region: str) -> List[CountryRead]:
    """Return the countries of a region, e.g. ``Europe`` (case-insensitive)."""
    return await CountryService.list_by_region(region)


@router.get("/code/{code}", response_model=CountryRead)
async def get_country_by_code(code: str) -> CountryRead:
    """Retrieve a country by alpha-2 (``DE``) or alpha-3 (``DEU``) code.

    Returns HTTP 404 if no country carries the code.
    """
    country = await CountryService.get_country_by_code(code)
    if country is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Country not found")
    return country


@router.get("/{country_id}", response_model=CountryRead)
async def get_country(country_id: CountryId) -> CountryRead:
    country = await CountryService.get_country(country_id)
    if country is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Country not found")
    return country


@router.patch("/{country_id}", response_model=CountryRead)
async def update_country(country_id: CountryId, country_in: CountryUpdate) -> CountryRead:
    """Merge the submitted fields into a country.

    Only keys present in the body change; ``null`` clears optional
    fields.  Returns 400 when ``name`` or a code is set to ``null``.
    """
    try:
        country = await CountryService.update_country(country_id, country_in)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if country is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Country not found")
    return country


@router.delete("/{country_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_country(country_id: CountryId) -> None:
    """Delete a country.  Records referring to it are not removed."""
    deleted = await CountryService.delete_country(country_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Country not found")
    return None
