"""
Pydantic schemas for countries.

A country carries its identity (name and ISO alpha-2/alpha-3 codes),
geography, and a handful of nested structures copied from the
restcountries API (currencies, languages, borders, timezones...).
``country_info`` is a free-form summary object; clients read
``governmentForm`` from it.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import ApiModel, SqliteInt


class CountryInfo(ApiModel):
    """Summary block shown on country pages.

    Unknown keys are kept so that editors may store extra facts.
    """

    capital: Optional[str] = None
    region: Optional[str] = None
    subregion: Optional[str] = None
    population: Optional[int] = None
    government_form: Optional[str] = None

    model_config = {**ApiModel.model_config, "extra": "allow"}


class CountryBase(ApiModel):
    capital: Optional[str] = Field(None, examples=["Berlin"])
    region: Optional[str] = Field(None, examples=["Europe"])
    subregion: Optional[str] = Field(None, examples=["Western Europe"])
    population: Optional[SqliteInt] = Field(None, examples=[83240525])
    area: Optional[float] = Field(None, allow_inf_nan=False, examples=[357114])
    flag_url: Optional[str] = None
    coat_of_arms_url: Optional[str] = None
    map_url: Optional[str] = None
    independent: Optional[bool] = None
    un_member: Optional[bool] = None
    currencies: Optional[Dict[str, Any]] = None
    languages: Optional[Dict[str, Any]] = None
    borders: Optional[List[str]] = None
    timezones: Optional[List[str]] = None
    start_of_week: Optional[str] = None
    capital_info: Optional[Dict[str, Any]] = None
    postal_code: Optional[Dict[str, Any]] = None
    flag: Optional[str] = Field(None, description="Emoji flag")
    country_info: Optional[CountryInfo] = None


class CountryCreate(CountryBase):
    """Schema for creating a country."""

    name: str = Field(..., min_length=1, examples=["Germany"])
    alpha2_code: str = Field(..., min_length=2, max_length=2, examples=["DE"])
    alpha3_code: str = Field(..., min_length=3, max_length=3, examples=["DEU"])


class CountryUpdate(CountryBase):
    """Schema for updating a country.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = Field(None, min_length=1)
    alpha2_code: Optional[str] = Field(None, min_length=2, max_length=2)
    alpha3_code: Optional[str] = Field(None, min_length=3, max_length=3)


class CountryRead(CountryBase):
    """Schema for reading a country from the API."""

    id: int
    name: str
    alpha2_code: str
    alpha3_code: str
