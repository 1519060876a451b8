"""
Pydantic schemas for political parties.

``seats`` and ``total_seats`` describe the party's share of parliament;
``is_ruling`` marks parties currently in government.  A party never
holds more seats than the parliament has.
"""

from typing import Optional

from pydantic import Field, model_validator

from .base import ApiModel, CountryRecordRead, SqliteInt


def check_seat_share(seats: Optional[int], total_seats: Optional[int]) -> None:
    """Raise ``ValueError`` if ``seats`` exceeds ``total_seats``."""
    if seats is not None and total_seats is not None and seats > total_seats:
        raise ValueError("seats cannot exceed totalSeats")


class PoliticalPartyCreate(ApiModel):
    """Schema for creating a political party."""

    name: str = Field(..., min_length=1, examples=["Social Democratic Party"])
    acronym: Optional[str] = Field(None, examples=["SPD"])
    color: Optional[str] = Field(None, examples=["#E3000F"])
    ideology: Optional[str] = None
    logo_url: Optional[str] = None
    founded_year: Optional[SqliteInt] = Field(None, examples=[1863])
    is_ruling: bool = False
    seats: Optional[SqliteInt] = Field(None, ge=0)
    total_seats: Optional[SqliteInt] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_seats(self):
        check_seat_share(self.seats, self.total_seats)
        return self


class PoliticalPartyUpdate(ApiModel):
    """Schema for updating a political party; all fields are optional.

    When only one of ``seats``/``totalSeats`` is sent, the service checks
    it against the stored value.
    """

    name: Optional[str] = Field(None, min_length=1)
    acronym: Optional[str] = None
    color: Optional[str] = None
    ideology: Optional[str] = None
    logo_url: Optional[str] = None
    founded_year: Optional[SqliteInt] = None
    is_ruling: Optional[bool] = None
    seats: Optional[SqliteInt] = Field(None, ge=0)
    total_seats: Optional[SqliteInt] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_seats(self):
        check_seat_share(self.seats, self.total_seats)
        return self


class PoliticalPartyRead(CountryRecordRead):
    name: str
    acronym: Optional[str] = None
    color: Optional[str] = None
    ideology: Optional[str] = None
    logo_url: Optional[str] = None
    founded_year: Optional[int] = None
    is_ruling: bool = False
    seats: Optional[int] = None
    total_seats: Optional[int] = None
