"""
Pydantic schemas for economic data.

A country normally has one economic data record.  ``main_industries``
and ``challenges`` are lists of small structured items; trading
partners, reforms and initiatives are plain lists.
"""

from typing import Any, List, Optional

from pydantic import Field

from .base import ApiModel, CountryRecordRead, SqliteInt


class Industry(ApiModel):
    name: str
    percentage: float = Field(..., ge=0, le=100)


class EconomicChallenge(ApiModel):
    title: str
    description: Optional[str] = None
    icon: Optional[str] = None


class EconomicDataBase(ApiModel):
    gdp: Optional[SqliteInt] = Field(None, description="GDP in billions USD", examples=[4082])
    gdp_per_capita: Optional[SqliteInt] = Field(None, examples=[48636])
    gdp_growth: Optional[str] = Field(None, examples=["-0.3%"])
    inflation: Optional[str] = Field(None, examples=["5.9%"])
    main_industries: Optional[List[Industry]] = None
    trading_partners: Optional[List[str]] = None
    challenges: Optional[List[EconomicChallenge]] = None
    reforms: Optional[List[str]] = None
    outlook: Optional[str] = None
    initiatives: Optional[List[Any]] = None


class EconomicDataCreate(EconomicDataBase):
    """Schema for creating economic data.  Every field is optional."""


class EconomicDataUpdate(EconomicDataBase):
    """Schema for updating economic data; only provided fields change."""


class EconomicDataRead(EconomicDataBase, CountryRecordRead):
    """Schema for reading economic data from the API."""
