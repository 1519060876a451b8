"""
Pydantic schemas for timeline events.

``date`` is free text so editors can record "1989", "May 1945" or a
full ISO date.  ``event_type`` groups events (election, protest,
agreement...) and ``icon`` names the icon shown on the timeline.
"""

from typing import List, Optional

from pydantic import Field

from .base import ApiModel, CountryRecordRead


class TimelineEventCreate(ApiModel):
    """Schema for creating a timeline event."""

    title: str = Field(..., min_length=1, examples=["Fall of the Berlin Wall"])
    description: str = Field(..., examples=["The border between East and West Berlin opens."])
    date: str = Field(..., min_length=1, examples=["1989-11-09"])
    event_type: str = Field(..., min_length=1, examples=["protest"])
    icon: Optional[str] = Field(None, examples=["landmark"])
    tags: Optional[List[str]] = None


class TimelineEventUpdate(ApiModel):
    """Schema for updating a timeline event.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[str] = Field(None, min_length=1)
    event_type: Optional[str] = Field(None, min_length=1)
    icon: Optional[str] = None
    tags: Optional[List[str]] = None


class TimelineEventRead(CountryRecordRead):
    title: str
    description: str
    date: str
    event_type: str
    icon: Optional[str] = None
    tags: Optional[List[str]] = None
