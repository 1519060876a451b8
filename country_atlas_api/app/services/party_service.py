"""Service layer for political parties."""

from typing import Optional

from country_atlas_api.app.schemas.party import (
    PoliticalPartyRead,
    PoliticalPartyUpdate,
    check_seat_share,
)
from country_atlas_api.app.services.base import CountryRecordService


class PartyService(CountryRecordService):
    """CRUD for ``political_parties``."""

    table = "political_parties"
    object_type = "political party"
    columns = (
        "name",
        "acronym",
        "color",
        "ideology",
        "logo_url",
        "founded_year",
        "is_ruling",
        "seats",
        "total_seats",
    )
    bool_columns = frozenset({"is_ruling"})
    required_columns = frozenset({"name", "is_ruling"})
    read_schema = PoliticalPartyRead

    @classmethod
    async def update(
        cls,
        record_id: int,
        data: PoliticalPartyUpdate,
        country_id: Optional[int] = None,
    ) -> Optional[PoliticalPartyRead]:
        """Partially update a party, keeping ``seats <= totalSeats``.

        A patch touching only one of the two fields is checked against
        the stored value of the other.
        """
        changes = data.model_dump(include={"seats", "total_seats"} & data.model_fields_set)
        if changes:
            current = await cls.get(record_id, country_id=country_id)
            if current is not None:
                check_seat_share(
                    changes.get("seats", current.seats),
                    changes.get("total_seats", current.total_seats),
                )
        return await super().update(record_id, data, country_id=country_id)
