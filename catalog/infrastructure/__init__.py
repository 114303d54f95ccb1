"""Infrastructure Layer — database sessions and logging setup.

Invariants:
    - Infrastructure never imports from core/ domain logic, except the error hierarchy
    - All storage exceptions mapped to DatabaseError

Design Decisions:
    - Process-wide singletons initialized in the FastAPI lifespan
"""
