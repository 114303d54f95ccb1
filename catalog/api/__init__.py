"""API Layer — FastAPI routes, error handlers, and request middleware.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (204 has no body)

Design Decisions:
    - Thin routes delegate to core parsers and services
"""
