"""Pydantic Schemas — response shapes for the REST API.

Invariants:
    - Field names are snake_case in Python and camelCase on the wire (publishedIn, createdAt)
    - Schemas read straight from ORM objects (from_attributes)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Request bodies are NOT Pydantic models: core/validate_body.py owns their
      messages and ordering
"""
