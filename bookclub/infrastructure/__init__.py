"""Infrastructure Layer — persistence gateway and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ route modules
    - All store calls wrapped with error mapping (no retries)
"""
