"""
Service layer abstraction.

Each service encapsulates the storage logic for a domain.  Route
handlers only talk to services, so the SQLite store behind them can
be swapped without changing the API layer.
"""
