"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies) before a route body runs
    - Optional text fields default to "" and progress to 0, as stored

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
