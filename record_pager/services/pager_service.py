# record_pager/services/pager_service.py
"""
Use-case layer over a paginated dataset.  Works with the Page container and
page-link ranges.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from record_pager.models.filter_spec import Query
from record_pager.models.page_range import PageRange, PageRangeConfig
from record_pager.models.pagination import Page
from record_pager.pagination.arithmetic import page_count, validate_page_size
from record_pager.pagination.dataset import PaginatedDataset
from record_pager.pagination.page_range import compute_page_range
from record_pager.pagination.window import coerce_page_number, window_for
from simple_logger import Slogger

DEFAULT_LINK_OPTIONS: Dict[str, Any] = {
    "page_param": "page",
    "min_leading_pages": 2,
    "min_trailing_pages": 2,
    "range_about_current_page": 3,
}


def _known_link_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in options.items() if k in DEFAULT_LINK_OPTIONS}


class PagerService:
    """Single pages with meta-data, page links, and whole-dataset traversal."""

    def __init__(
        self,
        dataset: PaginatedDataset,
        *,
        link_options: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._dataset = dataset
        self._link_options = {**DEFAULT_LINK_OPTIONS, **_known_link_options(link_options or {})}

    @property
    def dataset(self) -> PaginatedDataset:
        return self._dataset

    # --------------------------------------------------------------------- #
    # read side
    # --------------------------------------------------------------------- #

    def page(
        self,
        *,
        page: Any = 1,
        per_page: int | None = None,
        query: Query | None = None,
    ) -> Page[Any]:
        """Return a Page of records for `query`; `per_page` overrides the handle's size for this call only."""
        per_page = validate_page_size(per_page) if per_page is not None else self._dataset.per_page
        number = coerce_page_number(page)

        items = self._dataset.fetch_window(window_for(number, per_page), query)
        total = self._dataset.count_matching(query)
        pages = page_count(total, per_page)

        Slogger.debug(
            "PagerService.page",
            {"page": number, "per_page": per_page, "total": total, "pages": pages},
        )
        return Page(items=items, total=total, pages=pages, page=number, per_page=per_page)

    def page_links(
        self,
        page_obj: Page[Any],
        *,
        params: Optional[Mapping[str, Any]] = None,
        skip_params: Sequence[str] = (),
        **overrides: Any,
    ) -> Optional[PageRange]:
        """Condensed page-link range for a Page returned by `page()`."""
        options = {**self._link_options, **_known_link_options(overrides)}
        config = PageRangeConfig(
            num_pages=page_obj.pages,
            current_page=page_obj.page,
            params=dict(params or {}),
            skip_params=tuple(skip_params),
            **options,
        )
        return compute_page_range(config)

    # --------------------------------------------------------------------- #
    # traversal
    # --------------------------------------------------------------------- #

    def each_by_page(self, query: Query | None, callback: Callable[[Any], Any]) -> int:
        visited = self._dataset.each_by_page(query, callback)
        Slogger.info(f"PagerService.each_by_page: Visited {visited} records")
        return visited

    def by_page(self, query: Query | None, callback: Callable[[list], Any]) -> int:
        batches = self._dataset.by_page(query, callback)
        Slogger.info(f"PagerService.by_page: Processed {batches} batches")
        return batches
