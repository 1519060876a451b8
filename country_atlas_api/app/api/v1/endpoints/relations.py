"""
International relation endpoints for API v1.

Mounted under ``/countries/{country_id}/relations``.  A relation
describes a bilateral tie (economic, military, cultural...) between
the country and a partner named in ``partnerCountry``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from country_atlas_api.app.api.v1.dependencies import CountryId, RecordId, get_country_or_404
from country_atlas_api.app.schemas.country import CountryRead
from country_atlas_api.app.schemas.relation import (
    InternationalRelationCreate,
    InternationalRelationRead,
    InternationalRelationUpdate,
)
from country_atlas_api.app.services.relation_service import RelationService

router = APIRouter()

NOT_FOUND = "International relation not found"


@router.get("", response_model=List[InternationalRelationRead])
async def list_relations(country_id: CountryId) -> List[InternationalRelationRead]:
    return await RelationService.list_for_country(country_id)


@router.post("", response_model=InternationalRelationRead, status_code=status.HTTP_201_CREATED)
async def create_relation(
    relation_in: InternationalRelationCreate,
    country: CountryRead = Depends(get_country_or_404),
) -> InternationalRelationRead:
    return await RelationService.create(country.id, relation_in)


@router.get("/{relation_id}", response_model=InternationalRelationRead)
async def get_relation(country_id: CountryId, relation_id: RecordId) -> InternationalRelationRead:
    relation = await RelationService.get(relation_id, country_id=country_id)
    if relation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return relation


@router.patch("/{relation_id}", response_model=InternationalRelationRead)
async def update_relation(
    country_id: CountryId,
    relation_id: RecordId,
    relation_in: InternationalRelationUpdate,
) -> InternationalRelationRead:
    try:
        relation = await RelationService.update(relation_id, relation_in, country_id=country_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if relation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return relation


@router.delete("/{relation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_relation(country_id: CountryId, relation_id: RecordId) -> None:
    deleted = await RelationService.delete(relation_id, country_id=country_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
