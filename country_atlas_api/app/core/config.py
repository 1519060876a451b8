"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an empty in-memory store and no extra setup.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Country Atlas API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path to a log file in addition to console output.
    log_file: str = os.getenv("LOG_FILE", "")

    # All routes are mounted under this prefix, e.g. ``/api/countries``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # SQLite database.  The default ``:memory:`` keeps all data in process
    # memory; a relative file path is resolved against the project root by
    # the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", ":memory:")

    # Source for ``/initialize``.  restcountries limits ``/all`` to ten
    # requested fields.
    restcountries_url: str = os.getenv(
        "RESTCOUNTRIES_URL",
        "https://restcountries.com/v3.1/all"
        "?fields=name,cca2,cca3,capital,region,subregion,population,area,flags,flag",
    )
    restcountries_timeout: float = float(os.getenv("RESTCOUNTRIES_TIMEOUT", "10"))

    # Exposes ``/debug/reset`` and ``/debug/deduplicate-countries``.
    enable_debug_routes: bool = _env_flag("ENABLE_DEBUG_ROUTES", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables should
# be set before importing this module.
settings = Settings()
