"""
Statistics endpoints for API v1.

``router`` is mounted under ``/countries/{country_id}/statistics``.
``by_id_router`` is mounted under ``/statistics`` and lets editors
read, patch and delete a statistic knowing only its id.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from country_atlas_api.app.api.v1.dependencies import CountryId, RecordId, get_country_or_404
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.schemas.statistic import StatisticCreate, StatisticRead, StatisticUpdate
from country_atlas_api.app.services.statistic_service import StatisticService

router = APIRouter()
by_id_router = APIRouter()

NOT_FOUND = "Statistic not found"


@router.get("", response_model=List[StatisticRead])
async def list_statistics(
    country_id: CountryId,
    stat_type: Optional[str] = Query(None, alias="type", description="Only return this type, e.g. Population"),
) -> List[StatisticRead]:
    return await StatisticService.list_for_country(country_id, stat_type=stat_type)


@router.post("", response_model=StatisticRead, status_code=status.HTTP_201_CREATED)
async def create_statistic(
    statistic_in: StatisticCreate,
    country: CountryRead = Depends(get_country_or_404),
) -> StatisticRead:
    return await StatisticService.create(country.id, statistic_in)


@router.get("/{statistic_id}", response_model=StatisticRead)
async def get_statistic(country_id: CountryId, statistic_id: RecordId) -> StatisticRead:
    return await _get_or_404(statistic_id, country_id)


@router.patch("/{statistic_id}", response_model=StatisticRead)
async def update_statistic(
    country_id: CountryId,
    statistic_id: RecordId,
    statistic_in: StatisticUpdate,
) -> StatisticRead:
    return await _update_or_404(statistic_id, statistic_in, country_id)


@router.delete("/{statistic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_statistic(country_id: CountryId, statistic_id: RecordId) -> None:
    await _delete_or_404(statistic_id, country_id)
    return None


@by_id_router.get("/{statistic_id}", response_model=StatisticRead)
async def get_statistic_by_id(statistic_id: RecordId) -> StatisticRead:
    return await _get_or_404(statistic_id)


@by_id_router.patch("/{statistic_id}", response_model=StatisticRead)
async def update_statistic_by_id(statistic_id: RecordId, statistic_in: StatisticUpdate) -> StatisticRead:
    return await _update_or_404(statistic_id, statistic_in)


@by_id_router.delete("/{statistic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_statistic_by_id(statistic_id: RecordId) -> None:
    await _delete_or_404(statistic_id)
    return None


async def _get_or_404(statistic_id: int, country_id: Optional[int] = None) -> StatisticRead:
    statistic = await StatisticService.get(statistic_id, country_id=country_id)
    if statistic is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return statistic


async def _update_or_404(
    statistic_id: int,
    statistic_in: StatisticUpdate,
    country_id: Optional[int] = None,
) -> StatisticRead:
    try:
        statistic = await StatisticService.update(statistic_id, statistic_in, country_id=country_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if statistic is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return statistic


async def _delete_or_404(statistic_id: int, country_id: Optional[int] = None) -> None:
    if not await StatisticService.delete(statistic_id, country_id=country_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
