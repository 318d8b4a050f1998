"""Condensed page-link range values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import urlencode

# Keys a web framework puts into request params that never belong in a link.
FRAMEWORK_PARAMS = ("action", "controller")


class PageGap(Enum):
    """Marker for an elided run of page numbers."""

    ELLIPSIS = "ellipsis"

    def __repr__(self) -> str:
        return "ELLIPSIS"


ELLIPSIS = PageGap.ELLIPSIS

PageToken = Union[int, PageGap]


@dataclass(frozen=True)
class PageRangeConfig:
    """Everything the page-link generator needs; nothing is read from ambient state."""

    num_pages: Optional[int] = None
    current_page: Any = 1
    page_param: str = "page"
    min_leading_pages: int = 2
    min_trailing_pages: int = 2
    range_about_current_page: int = 3
    params: Mapping[str, Any] = field(default_factory=dict)
    skip_params: Sequence[str] = ()


@dataclass(frozen=True)
class PageRange:
    tokens: Tuple[PageToken, ...]
    page_param: str
    current_page: int
    params: Mapping[str, Any] = field(default_factory=dict)

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def pages(self) -> Tuple[int, ...]:
        """Just the page numbers, gaps dropped."""
        return tuple(t for t in self.tokens if t is not ELLIPSIS)

    def is_current(self, token: PageToken) -> bool:
        return token == self.current_page

    def link_params(self, page: int) -> Dict[str, Any]:
        """Parameters for a link to `page`; skipped keys were removed up front."""
        return {**self.params, self.page_param: page}

    def href(self, page: int, base_path: str = "") -> str:
        return f"{base_path}?{urlencode(self.link_params(page))}"
