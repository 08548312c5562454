"""Book Club API — book tracking and reading-club backend."""

__version__ = "1.0.0"
