"""
Initialization endpoint for API v1.

``GET /initialize`` seeds an empty store with countries from the
restcountries API, or from the built-in sample list when that API is
unavailable.  Calling it again once countries exist is a no-op.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from country_atlas_api.app.services.seed_service import SeedService

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def initialize_countries() -> Any:
    """Seed countries and report where they came from.

    The response carries ``source`` (``existing``, ``restcountries`` or
    ``fallback``) and the number of countries ``created``.
    """
    try:
        return await SeedService.initialize()
    except Exception:
        logging.getLogger(__name__).exception("Error initializing countries data")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "message": "Failed to initialize countries data"},
        )
