"""record_pager data models."""

from record_pager.models.filter_spec import ExplicitTotal, FilterSpec, Query
from record_pager.models.page_range import (
    ELLIPSIS,
    PageGap,
    PageRange,
    PageRangeConfig,
    PageToken,
)
from record_pager.models.pagination import Page, SelectionWindow

__all__ = [
    "ELLIPSIS",
    "ExplicitTotal",
    "FilterSpec",
    "Page",
    "PageGap",
    "PageRange",
    "PageRangeConfig",
    "PageToken",
    "Query",
    "SelectionWindow",
]
