"""API Layer — FastAPI route table, handlers and error handlers.

Invariants:
    - Routes registered explicitly from the route table (no auto-discovery)
    - All endpoints return structured JSON responses
"""
