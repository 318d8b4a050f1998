"""Condense 1..num_pages into page numbers and ellipsis gaps for page links."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from record_pager.models.page_range import (
    ELLIPSIS,
    FRAMEWORK_PARAMS,
    PageRange,
    PageRangeConfig,
    PageToken,
)
from record_pager.pagination.window import coerce_page_number

logger = logging.getLogger(__name__)


def _non_negative(value) -> int:
    return max(int(value or 0), 0)


def condense(pages: Iterable[int]) -> List[PageToken]:
    """
    Sort and dedupe `pages`, inserting one ELLIPSIS wherever consecutive
    values differ by more than one.

    >>> condense([1, 2, 5, 6, 9])
    [1, 2, ELLIPSIS, 5, 6, ELLIPSIS, 9]
    """
    tokens: List[PageToken] = []
    previous: Optional[int] = None
    for page in sorted(set(pages)):
        if previous is not None and page != previous + 1:
            tokens.append(ELLIPSIS)
        tokens.append(page)
        previous = page
    return tokens


def compute_page_range(config: PageRangeConfig) -> Optional[PageRange]:
    """
    Build the condensed page-link range described by `config`.

    Returns None when there is nothing worth linking (no page count, or
    fewer than two pages). Otherwise the union of the leading pages, the
    trailing pages and the pages around the current one, e.g. 20 pages with
    current page 10 and the default windows:

        1 2 … 7 8 9 10 11 12 … 19 20
    """
    if config.num_pages is None:
        return None
    num_pages = int(config.num_pages)
    if num_pages <= 1:
        return None

    current = coerce_page_number(config.current_page)
    leading = _non_negative(config.min_leading_pages)
    trailing = _non_negative(config.min_trailing_pages)
    around = _non_negative(config.range_about_current_page)

    leading_pages = range(1, min(leading, num_pages) + 1)
    trailing_pages = range(max(num_pages - trailing + 1, 1), num_pages + 1)
    # current - around .. current + around - 1, never without the current page
    low = max(current - around, 1)
    high = min(max(current + around - 1, current), num_pages)
    neighborhood = range(low, high + 1)

    tokens = condense([*leading_pages, *neighborhood, *trailing_pages])

    skipped = set(FRAMEWORK_PARAMS) | set(config.skip_params) | {config.page_param}
    params = {k: v for k, v in config.params.items() if k not in skipped}

    logger.debug(f"Page range for page {current} of {num_pages}: {tokens}")
    return PageRange(
        tokens=tuple(tokens),
        page_param=config.page_param,
        current_page=current,
        params=params,
    )
