"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified prefix.
Every record type other than countries is nested below
``/countries/{country_id}``.  The debug router is not included here;
``main.create_app`` mounts it when debug routes are enabled.
"""

from fastapi import APIRouter

from .endpoints import (
    countries,
    timeline,
    leaders,
    political_system,
    parties,
    relations,
    laws,
    statistics,
    economy,
    initialize,
)

COUNTRY_SCOPE = "/countries/{country_id}"

router = APIRouter()

router.include_router(initialize.router, prefix="/initialize", tags=["initialize"])
# Countries come before the nested routers so that fixed segments such as
# ``/countries/region/economy`` win over ``/countries/{country_id}/economy``.
router.include_router(countries.router, prefix="/countries", tags=["countries"])
router.include_router(timeline.router, prefix=f"{COUNTRY_SCOPE}/timeline", tags=["timeline"])
router.include_router(leaders.router, prefix=f"{COUNTRY_SCOPE}/leaders", tags=["leaders"])
router.include_router(
    political_system.router, prefix=f"{COUNTRY_SCOPE}/political-system", tags=["political-system"]
)
router.include_router(parties.router, prefix=f"{COUNTRY_SCOPE}/parties", tags=["parties"])
router.include_router(relations.router, prefix=f"{COUNTRY_SCOPE}/relations", tags=["relations"])
router.include_router(laws.router, prefix=f"{COUNTRY_SCOPE}/laws", tags=["laws"])
router.include_router(statistics.router, prefix=f"{COUNTRY_SCOPE}/statistics", tags=["statistics"])
router.include_router(economy.router, prefix=f"{COUNTRY_SCOPE}/economy", tags=["economy"])
router.include_router(statistics.by_id_router, prefix="/statistics", tags=["statistics"])
