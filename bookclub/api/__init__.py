"""API Layer — FastAPI routes, error handlers and request middleware.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors use the {"error": <message>} envelope
"""
