"""
Maintenance endpoints for API v1.

Mounted under ``/debug`` when ``ENABLE_DEBUG_ROUTES`` is on.  Admin
tools use them to wipe the store or to clean up countries duplicated
by repeated seeding.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter

from country_atlas_api.app.core.db import reset_db
from country_atlas_api.app.services.country_service import CountryService

router = APIRouter()


@router.post("/reset", response_model=Dict[str, Any])
async def reset_store() -> Dict[str, Any]:
    """Delete every record of every entity and restart ids at 1."""
    reset_db()
    logging.getLogger(__name__).warning("All data cleared via /debug/reset")
    return {"success": True, "message": "All data cleared"}


@router.post("/deduplicate-countries", response_model=Dict[str, Any])
async def deduplicate_countries() -> Dict[str, Any]:
    """Remove countries whose alpha-2 or alpha-3 code repeats an older one."""
    removed = await CountryService.deduplicate_countries()
    return {
        "success": True,
        "message": f"Removed {removed} duplicate countries",
        "removed": removed,
    }
