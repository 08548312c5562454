"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Each route validates input, issues one gateway call, and maps the outcome
"""
