"""Page count / page-for-entry arithmetic."""

from __future__ import annotations

from record_pager.errors import InvalidPageSizeError

DEFAULT_PAGE_SIZE = 20


def validate_page_size(page_size: int) -> int:
    """Return `page_size` unchanged, or raise InvalidPageSizeError."""
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise InvalidPageSizeError(page_size)
    return page_size


def _ceil_div(numerator: int, page_size: int) -> int:
    pages, remainder = divmod(numerator, page_size)
    return pages + 1 if remainder > 0 else pages


def page_count(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """
    Number of pages needed for `total` records.

    An exact multiple does not add a page: page_count(40, 20) == 2,
    page_count(41, 20) == 3, page_count(0, 20) == 0.
    """
    validate_page_size(page_size)
    if total < 0:
        raise ValueError(f"total must be non-negative, got {total}")
    return _ceil_div(total, page_size)


def page_for_entry(entry_number: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """
    1-based page holding the 1-based `entry_number`.

    page_for_entry(20, 20) == 1, page_for_entry(21, 20) == 2. Entry numbers
    below 1 are reported as page 1.
    """
    validate_page_size(page_size)
    return max(_ceil_div(entry_number, page_size), 1)
