"""Pydantic schemas for political leaders."""

from typing import List, Optional

from pydantic import Field

from .base import ApiModel, CountryRecordRead


class PoliticalLeaderCreate(ApiModel):
    """Schema for creating a political leader."""

    name: str = Field(..., min_length=1, examples=["Olaf Scholz"])
    title: str = Field(..., min_length=1, examples=["Chancellor"])
    party: Optional[str] = None
    image_url: Optional[str] = None
    start_date: Optional[str] = Field(None, examples=["2021-12-08"])
    ideologies: Optional[List[str]] = None


class PoliticalLeaderUpdate(ApiModel):
    """Schema for updating a political leader; all fields are optional."""

    name: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1)
    party: Optional[str] = None
    image_url: Optional[str] = None
    start_date: Optional[str] = None
    ideologies: Optional[List[str]] = None


class PoliticalLeaderRead(CountryRecordRead):
    name: str
    title: str
    party: Optional[str] = None
    image_url: Optional[str] = None
    start_date: Optional[str] = None
    ideologies: Optional[List[str]] = None
