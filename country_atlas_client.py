"""Country Atlas API client.

This module defines a small client wrapper around the Country Atlas
REST API.  Admin scripts use it to do what the web editors do:
seed countries, edit country facts and manage the records attached to
a country (timeline, leaders, political system, parties, relations,
laws, statistics and economic data).  The client uses the
``requests`` library internally to make HTTP calls.

Every public method returns a tuple ``(data, error)`` instead of
raising.  On success ``error`` is ``None``; on failure ``data`` is
``None`` (or an empty list / ``False``) and ``error`` is a dictionary
with keys ``status_code`` and ``message``.

Example::

    api = CountryAtlasAPI(base_url="http://localhost:5000")
    germany, error = api.get_country_by_code("DE")
    if not error:
        api.create_record(germany["id"], "timeline", {
            "title": "Reunification",
            "description": "East and West Germany reunite.",
            "date": "1990-10-03",
            "eventType": "agreement",
        })
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

# Record collections nested under ``/countries/{id}``.
RESOURCES = (
    "timeline",
    "leaders",
    "political-system",
    "parties",
    "relations",
    "laws",
    "statistics",
    "economy",
)

# Collections holding at most one record per country in practice;
# ``GET`` on them returns an object rather than a list.
SINGLE_RECORD_RESOURCES = frozenset({"political-system", "economy"})

Error = Dict[str, Any]


class CountryAtlasAPI:
    """Client for interacting with the Country Atlas API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:5000``.
            api_prefix: Prefix under which the API is mounted.
            timeout: Timeout in seconds applied to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/countries``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request (for POST/PATCH).
        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies).
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _resource_path(country_id: Any, resource: str) -> str:
        if resource not in RESOURCES:
            raise ValueError(f"Unknown resource {resource!r}; expected one of {', '.join(RESOURCES)}")
        return f"/countries/{country_id}/{resource}"

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------
    def initialize(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Seed countries on the server (no-op when countries exist)."""
        return self._request("GET", "/initialize")

    def reset(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Wipe every record on the server.  Requires debug routes."""
        return self._request("POST", "/debug/reset")

    def deduplicate_countries(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/debug/deduplicate-countries")

    # ------------------------------------------------------------------
    # Country operations
    # ------------------------------------------------------------------
    def list_countries(self, region: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all countries, or those of ``region`` when given."""
        path = f"/countries/region/{region}" if region else "/countries"
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_country(self, country_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/countries/{country_id}")

    def get_country_by_code(self, code: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a country by its alpha-2 or alpha-3 code."""
        return self._request("GET", f"/countries/code/{code}")

    def create_country(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/countries", json_body=payload)

    def update_country(
        self, country_id: Any, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send a partial update; only the keys in ``changes`` are modified."""
        return self._request("PATCH", f"/countries/{country_id}", json_body=changes)

    def delete_country(self, country_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/countries/{country_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Country-scoped records
    # ------------------------------------------------------------------
    def list_records(
        self, country_id: Any, resource: str, params: Optional[Dict[str, Any]] = None
    ) -> Tuple[Any, Optional[Error]]:
        """List the records of ``resource`` for a country.

        For ``political-system`` and ``economy`` the server returns the
        country's single record (or a 404 error) instead of a list.
        """
        data, error = self._request("GET", self._resource_path(country_id, resource), params=params)
        if error:
            return (None if resource in SINGLE_RECORD_RESOURCES else []), error
        return data, None

    def get_record(
        self, country_id: Any, resource: str, record_id: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"{self._resource_path(country_id, resource)}/{record_id}")

    def create_record(
        self, country_id: Any, resource: str, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record; the server takes ``countryId`` from the path."""
        return self._request("POST", self._resource_path(country_id, resource), json_body=payload)

    def update_record(
        self, country_id: Any, resource: str, record_id: Any, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "PATCH", f"{self._resource_path(country_id, resource)}/{record_id}", json_body=changes
        )

    def delete_record(self, country_id: Any, resource: str, record_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"{self._resource_path(country_id, resource)}/{record_id}")
        return error is None, error

    def update_statistic(
        self, statistic_id: Any, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Patch a statistic knowing only its id."""
        return self._request("PATCH", f"/statistics/{statistic_id}", json_body=changes)
