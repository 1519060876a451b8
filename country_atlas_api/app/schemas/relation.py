"""Pydantic schemas for international relations."""

from typing import Optional

from pydantic import Field

from .base import ApiModel, CountryRecordRead


class InternationalRelationCreate(ApiModel):
    """Schema for creating an international relation.

    ``iso_code`` is the partner's ISO 3166-1 alpha-2 code, used by
    clients to show the partner's flag.
    """

    partner_country: str = Field(..., min_length=1, examples=["France"])
    relation_type: str = Field(..., min_length=1, examples=["Economic"])
    relation_strength: Optional[str] = Field(None, examples=["Strong"])
    details: Optional[str] = None
    start_date: Optional[str] = None
    iso_code: Optional[str] = Field(None, examples=["FR"])


class InternationalRelationUpdate(ApiModel):
    """Schema for updating an international relation; all fields are optional."""

    partner_country: Optional[str] = Field(None, min_length=1)
    relation_type: Optional[str] = Field(None, min_length=1)
    relation_strength: Optional[str] = None
    details: Optional[str] = None
    start_date: Optional[str] = None
    iso_code: Optional[str] = None


class InternationalRelationRead(CountryRecordRead):
    partner_country: str
    relation_type: str
    relation_strength: Optional[str] = None
    details: Optional[str] = None
    start_date: Optional[str] = None
    iso_code: Optional[str] = None
