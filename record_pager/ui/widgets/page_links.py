"""
Page-links widget for jumping straight to a page of results
"""

from typing import Optional

from textual.containers import Container
from textual.message import Message
from textual.widgets import Button, Label

from record_pager.models.page_range import ELLIPSIS, PageRange
from record_pager.ui.page_links import ELLIPSIS_GLYPH


class PageButton(Button):
    """A button that knows which page it links to"""

    def __init__(self, page: int, *, current: bool = False) -> None:
        classes = "page-button current-page" if current else "page-button"
        super().__init__(str(page), classes=classes, disabled=current)
        self.page_number = page


class PageLinks(Container):
    """
    One button per page in a condensed page range, with gaps shown as an ellipsis
    """

    DEFAULT_CSS = """
    PageLinks {
        layout: horizontal;
        height: 3;
        content-align: center middle;
    }

    PageLinks > Button {
        min-width: 5;
        margin: 0 1;
    }

    PageLinks > .page-gap {
        min-width: 3;
        content-align: center middle;
    }
    """

    class PageChanged(Message):
        """Page changed message"""
        def __init__(self, page: int) -> None:
            super().__init__()
            self.page = page

    def __init__(
        self,
        page_range: Optional[PageRange] = None,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """
        Initialize the PageLinks widget

        Args:
            page_range: Range to show; None shows nothing
            id: Optional widget ID
            classes: Optional CSS classes
        """
        super().__init__(id=id, classes=classes)
        self.page_range = page_range

    def _links(self):
        if self.page_range is None:
            return []
        widgets = []
        for token in self.page_range.tokens:
            if token is ELLIPSIS:
                widgets.append(Label(ELLIPSIS_GLYPH, classes="page-gap"))
            else:
                widgets.append(PageButton(token, current=self.page_range.is_current(token)))
        return widgets

    def compose(self):
        """Create child widgets"""
        yield from self._links()

    def update_range(self, page_range: Optional[PageRange]) -> None:
        """
        Replace the links with those for a new range

        Args:
            page_range: New range; None clears the links
        """
        self.page_range = page_range
        self.remove_children()
        links = self._links()
        if links:
            self.mount(*links)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle page button presses"""
        if isinstance(event.button, PageButton):
            event.stop()
            self.post_message(self.PageChanged(event.button.page_number))
