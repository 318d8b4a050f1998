"""Pagination core: arithmetic, windows, snapshot traversal and page-link ranges."""

from record_pager.pagination.arithmetic import (
    DEFAULT_PAGE_SIZE,
    page_count,
    page_for_entry,
    validate_page_size,
)
from record_pager.pagination.batch_iterator import SnapshotBatchIterator
from record_pager.pagination.dataset import PaginatedDataset
from record_pager.pagination.page_range import compute_page_range, condense
from record_pager.pagination.window import coerce_page_number, window_for

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "PaginatedDataset",
    "SnapshotBatchIterator",
    "coerce_page_number",
    "compute_page_range",
    "condense",
    "page_count",
    "page_for_entry",
    "validate_page_size",
    "window_for",
]
