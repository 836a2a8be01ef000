"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the storage layer, which only deals in
plain JSON dicts, so the API representation can evolve on its own.
"""
