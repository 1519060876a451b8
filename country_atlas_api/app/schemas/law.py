"""Pydantic schemas for historical laws."""

from typing import Optional

from pydantic import Field

from .base import ApiModel, CountryRecordRead


class HistoricalLawCreate(ApiModel):
    title: str = Field(..., min_length=1, examples=["Basic Law"])
    description: Optional[str] = None
    date: Optional[str] = Field(None, examples=["1949-05-23"])
    category: Optional[str] = Field(None, examples=["Constitutional"])
    status: Optional[str] = Field(None, examples=["Enacted"])


class HistoricalLawUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None


class HistoricalLawRead(CountryRecordRead):
    title: str
    description: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
