"""
Pydantic schema definitions for API payloads.

Schemas are separated from the service layer so the HTTP
representation can evolve independently of the in-memory store.
"""
