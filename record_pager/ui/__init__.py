"""Presentation helpers (rich / textual)."""
