"""
Pydantic schemas for statistics.

A statistic is a typed series (Population, GDP, Religion,
Ethnicity...) whose ``data`` holds the chart points, typically
``{"label": ..., "value": ...}`` objects.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import ApiModel, CountryRecordRead, SqliteInt


class StatisticCreate(ApiModel):
    """Schema for creating a statistic."""

    type: str = Field(..., min_length=1, examples=["Religion"])
    data: Optional[List[Dict[str, Any]]] = Field(
        None, examples=[[{"label": "Christianity", "value": 52.1}]]
    )
    year: Optional[SqliteInt] = Field(None, examples=[2023])


class StatisticUpdate(ApiModel):
    type: Optional[str] = Field(None, min_length=1)
    data: Optional[List[Dict[str, Any]]] = None
    year: Optional[SqliteInt] = None


class StatisticRead(CountryRecordRead):
    type: str
    data: Optional[List[Dict[str, Any]]] = None
    year: Optional[int] = None
