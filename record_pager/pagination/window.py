"""Turn a requested page number into a (limit, offset) selection window."""

from __future__ import annotations

import math
import re
from typing import Any

from record_pager.models.pagination import SelectionWindow
from record_pager.pagination.arithmetic import validate_page_size

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_page_number(value: Any) -> int:
    """
    Clamp a user-supplied page number to an int >= 1.

    Strings are read up to their first non-digit ("3", " 4 ", "5abc"); None,
    NaN, infinities, garbage and anything <= 0 become 1.
    """
    if isinstance(value, bool):
        number = int(value)
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if math.isfinite(value) else 0
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        number = int(match.group(1)) if match else 0
    else:
        number = 0
    return max(number, 1)


def window_for(page_number: Any, page_size: int) -> SelectionWindow:
    """window_for(3, 10) == SelectionWindow(limit=10, offset=20)"""
    validate_page_size(page_size)
    page = coerce_page_number(page_number)
    return SelectionWindow(limit=page_size, offset=(page - 1) * page_size)
