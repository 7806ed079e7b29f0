"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage layer so that the JSON
representation of a record does not depend on the table layout.
"""
