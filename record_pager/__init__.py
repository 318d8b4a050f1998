"""Page-oriented retrieval and snapshot batch traversal over SQLite-backed records."""

__version__ = "0.1.0"
