"""
Version 1 of the API.

This subpackage bundles all endpoints of the Country Atlas API.  It is
mounted under the configured ``api_prefix`` (``/api`` by default).
"""
