"""
Top‑level package for the Country Atlas API.

This file makes ``country_atlas_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``country_atlas_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
