"""Database Layer — declarative Base and idempotent schema bootstrap.

Invariants:
    - All models inherit from Base (db/base.py)
    - create_schema() is the only DDL entry point and is safe to re-run
"""
