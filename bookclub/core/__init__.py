"""Core Layer — framework-independent error types shared by every layer."""
