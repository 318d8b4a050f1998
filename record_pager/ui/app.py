"""
Textual browser for one table, a page at a time
"""

from __future__ import annotations

from typing import Any, List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.reactive import reactive
from textual.widgets import DataTable, Footer, Header, Static

from record_pager.models.filter_spec import Query
from record_pager.models.pagination import Page
from record_pager.services.pager_service import PagerService
from record_pager.ui.widgets.page_links import PageLinks
from simple_logger import Slogger


class RecordBrowserApp(App):
    """Shows one page of records with page links underneath."""

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("n", "next_page", "Next Page", show=True),
        Binding("p", "prev_page", "Prev Page", show=True),
    ]

    current_page: int = reactive(1, init=False)

    def __init__(
        self,
        service: PagerService,
        query: Optional[Query] = None,
        *,
        page: int = 1,
        title: str = "",
    ) -> None:
        super().__init__()
        self.set_reactive(RecordBrowserApp.current_page, page)
        self.service = service
        self.query_spec = query
        self.page_obj: Optional[Page[Any]] = None
        self._columns: List[str] = []
        if title:
            self.title = title

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="records")
        yield PageLinks(id="page-links")
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#records", DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        self.load_page()

    def watch_current_page(self, old_page: int, new_page: int) -> None:
        if old_page != new_page:
            self.load_page()

    def load_page(self) -> None:
        """Fetch the current page from the service and refresh the widgets."""
        page_obj = self.service.page(page=self.current_page, query=self.query_spec)
        self.page_obj = page_obj
        records = list(page_obj.items)

        table = self.query_one("#records", DataTable)
        if not self._columns and records:
            self._columns = list(records[0].keys())
            table.add_columns(*self._columns)
        table.clear()
        for record in records:
            table.add_row(*("" if record.get(c) is None else str(record.get(c)) for c in self._columns))

        self.query_one(PageLinks).update_range(self.service.page_links(page_obj))
        self.query_one("#status-bar", Static).update(
            f"Page {page_obj.page} of {page_obj.pages} | {page_obj.total} records"
        )
        Slogger.debug(f"RecordBrowserApp.load_page: page {page_obj.page} of {page_obj.pages}")

    def action_next_page(self) -> None:
        if self.page_obj is not None and self.page_obj.has_next():
            self.current_page += 1

    def action_prev_page(self) -> None:
        if self.page_obj is not None and self.page_obj.has_prev():
            self.current_page -= 1

    def on_page_links_page_changed(self, event: PageLinks.PageChanged) -> None:
        self.current_page = event.page
