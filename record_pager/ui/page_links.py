"""
Rich renderables for a page of records and its page links
"""

from typing import Any, Mapping, Optional, Sequence

from rich.table import Table
from rich.text import Text

from record_pager.models.page_range import ELLIPSIS, PageRange

ELLIPSIS_GLYPH = "…"


def render_page_links(page_range: Optional[PageRange], current_style: str = "bold reverse") -> Text:
    """
    Render a page range as a single line of text, e.g. ``1 2 … 9 [10] 11 … 20``.

    The current page is styled with `current_style`; an empty Text is
    returned when there is no range to show.
    """
    text = Text()
    if page_range is None:
        return text

    for index, token in enumerate(page_range.tokens):
        if index:
            text.append(" ")
        if token is ELLIPSIS:
            text.append(ELLIPSIS_GLYPH, style="dim")
        elif page_range.is_current(token):
            text.append(str(token), style=current_style)
        else:
            text.append(str(token))
    return text


def render_records(
    records: Sequence[Mapping[str, Any]],
    columns: Optional[Sequence[str]] = None,
    title: Optional[str] = None,
) -> Table:
    """A table with one row per record; columns default to the first record's keys."""
    if columns is None:
        columns = list(records[0].keys()) if records else []

    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    for record in records:
        table.add_row(*("" if record.get(c) is None else str(record.get(c)) for c in columns))
    return table
