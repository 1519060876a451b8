"""
Pydantic schema definitions for API payloads.

Each domain (countries, timeline events, leaders, etc.) defines its
own Pydantic models for request and response bodies.  Schemas are
separated from the storage layer to decouple the API representation
from persistence.  Attribute names are snake_case; on the wire they
are camelCase (see ``base.ApiModel``).
"""
