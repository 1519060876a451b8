"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Countries are the root of the data model; every other
domain (timeline events, leaders, parties, relations, laws,
statistics, economy) hangs off a country and exposes its own router
defined in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
