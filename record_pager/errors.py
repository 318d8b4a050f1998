# record_pager/errors.py

class PagerError(Exception):
    """Base class for all record_pager errors."""
    pass

class InvalidPageSizeError(PagerError, ValueError):
    """A page size of zero, a negative one, or a non-integer was supplied."""

    def __init__(self, page_size):
        super().__init__(f"Page size must be a positive integer, got {page_size!r}")
        self.page_size = page_size

class ConfigError(PagerError):
    """Error related to configuration."""
    pass

class DatabaseError(PagerError):
    """Error related to opening the database."""
    pass
