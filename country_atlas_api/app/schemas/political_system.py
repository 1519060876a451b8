"""
Pydantic schemas for political systems.

A country normally has one political system record.  Besides the
system type and a 0-100 freedom index, it holds several lists edited
as free-form items: government branches, democratic principles,
international relations, notable laws, organisation memberships and
ongoing conflicts.
"""

from typing import Any, List, Optional

from pydantic import Field

from .base import ApiModel, CountryRecordRead


class PoliticalSystemCreate(ApiModel):
    """Schema for creating a political system."""

    type: str = Field(..., min_length=1, examples=["Federal parliamentary republic"])
    details: Optional[str] = None
    freedom_index: Optional[int] = Field(None, ge=0, le=100, examples=[94])
    election_system: Optional[str] = None
    government_branches: Optional[List[Any]] = None
    democratic_principles: Optional[List[Any]] = None
    international_relations: Optional[List[Any]] = None
    laws: Optional[List[Any]] = None
    organizations: Optional[List[Any]] = None
    has_unstable_political_situation: bool = False
    ongoing_conflicts: Optional[List[Any]] = None


class PoliticalSystemUpdate(ApiModel):
    """Schema for updating a political system; all fields are optional."""

    type: Optional[str] = Field(None, min_length=1)
    details: Optional[str] = None
    freedom_index: Optional[int] = Field(None, ge=0, le=100)
    election_system: Optional[str] = None
    government_branches: Optional[List[Any]] = None
    democratic_principles: Optional[List[Any]] = None
    international_relations: Optional[List[Any]] = None
    laws: Optional[List[Any]] = None
    organizations: Optional[List[Any]] = None
    has_unstable_political_situation: Optional[bool] = None
    ongoing_conflicts: Optional[List[Any]] = None


class PoliticalSystemRead(CountryRecordRead):
    type: str
    details: Optional[str] = None
    freedom_index: Optional[int] = None
    election_system: Optional[str] = None
    government_branches: Optional[List[Any]] = None
    democratic_principles: Optional[List[Any]] = None
    international_relations: Optional[List[Any]] = None
    laws: Optional[List[Any]] = None
    organizations: Optional[List[Any]] = None
    has_unstable_political_situation: bool = False
    ongoing_conflicts: Optional[List[Any]] = None
