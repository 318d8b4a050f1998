"""
Pagination behaviour shared by every dataset handle.

A concrete dataset implements the DatasetQuery operations plus
`fetch_window`; everything else (page size, single pages, page counts and
snapshot traversal) comes from PaginatedDataset.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Union

from record_pager.interfaces.dataset import DatasetQuery
from record_pager.models.filter_spec import ExplicitTotal, FilterSpec, Query
from record_pager.models.pagination import SelectionWindow
from record_pager.pagination.arithmetic import (
    DEFAULT_PAGE_SIZE,
    page_count,
    page_for_entry,
    validate_page_size,
)
from record_pager.pagination.batch_iterator import Batch, SnapshotBatchIterator
from record_pager.pagination.window import window_for


class PaginatedDataset(DatasetQuery):
    """Mixes page-oriented retrieval into a DatasetQuery."""

    def __init__(self, per_page: int = DEFAULT_PAGE_SIZE) -> None:
        self._per_page = validate_page_size(per_page)

    # ---------- page size ---------------------------------------------------

    @property
    def per_page(self) -> int:
        """Records per page for this handle."""
        return self._per_page

    @per_page.setter
    def per_page(self, value: int) -> None:
        self._per_page = validate_page_size(value)

    def get_page_size(self) -> int:
        return self.per_page

    def set_page_size(self, value: int) -> None:
        self.per_page = value

    # ---------- single pages ------------------------------------------------

    def fetch_window(self, window: SelectionWindow, query: Optional[Query] = None) -> List[Any]:
        """Records in `window` of the ordered, filtered dataset."""
        raise NotImplementedError("Subclasses must implement fetch_window")

    def page(self, page_number: Any = 1, query: Optional[Query] = None) -> List[Any]:
        """
        Return the requested page, applying `query`.

        `page_number` is clamped: None, garbage and values below 1 all give
        the first page.
        """
        return list(self.fetch_window(window_for(page_number, self.per_page), query))

    # ---------- counting ----------------------------------------------------

    def resolve_total(self, spec: Union[FilterSpec, int, str, None] = None) -> int:
        """
        Turn a filter spec into a record count.

        None counts everything, an int or ExplicitTotal is taken as given, a
        Query (or a bare WHERE string) is counted by the store.
        """
        if spec is None:
            return self.count_matching(None)
        if isinstance(spec, bool):
            raise TypeError("A boolean is not a valid filter spec")
        if isinstance(spec, int):
            return ExplicitTotal(spec).total
        if isinstance(spec, ExplicitTotal):
            return spec.total
        if isinstance(spec, str):
            return self.count_matching(Query(where=spec))
        if isinstance(spec, Query):
            return self.count_matching(spec)
        raise TypeError(f"Unsupported filter spec: {spec!r}")

    def page_count(self, spec: Union[FilterSpec, int, str, None] = None) -> int:
        """The number of pages for this dataset, or for the records matching `spec`."""
        return page_count(self.resolve_total(spec), self.per_page)

    def page_for_entry(self, entry_number: int) -> int:
        """The page a given (1-based) entry number would be on."""
        return page_for_entry(entry_number, self.per_page)

    # ---------- traversal ---------------------------------------------------

    def batch_iterator(self) -> SnapshotBatchIterator:
        return SnapshotBatchIterator(self, self.per_page)

    def iter_batches(self, query: Optional[Query] = None) -> Iterator[Batch]:
        return self.batch_iterator().iter_batches(query)

    def by_page(self, query: Optional[Query], callback: Callable[[Batch], Any]) -> int:
        """
        Hand every record matching `query` to `callback`, one batch of at most
        `per_page` records at a time. Safe for callbacks that modify or delete
        the records, including the fields the query filters or orders on.
        """
        return self.batch_iterator().by_page(query, callback)

    def each_by_page(self, query: Optional[Query], callback: Callable[[Any], Any]) -> int:
        """Like by_page, but `callback` receives one record at a time."""
        return self.batch_iterator().each_by_page(query, callback)
