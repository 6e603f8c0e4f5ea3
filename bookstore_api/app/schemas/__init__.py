"""
Pydantic schema definitions for API payloads.

Each entity defines a result shape for responses, an add shape for
creation requests and an edit shape for updates.  Schemas are kept
separate from the domain models so the API representation can evolve
independently of persistence.
"""
