"""
Pydantic schema definitions for API payloads.

Schemas are separated from the persisted entities in ``models`` to
decouple the API representation from storage.
"""
