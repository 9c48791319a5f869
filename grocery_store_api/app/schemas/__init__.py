"""
Pydantic schema definitions for API payloads.

Schemas double as the persisted record format: the backing file holds
serialized ``Customer`` objects.
"""
