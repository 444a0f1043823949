"""DetailPanel widget - scrollable read-only text overlay (describe view)."""

from __future__ import annotations

from contextlib import suppress

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.css.query import NoMatches, WrongType
from textual.widgets import Static

from k4a.constants.limits import DETAIL_CHROME_HEIGHT, MIN_CONTENT_HEIGHT
from k4a.constants.values import DETAIL_HELP_TEXT


class DetailPanel(Vertical):
    """Title, scrollable body and a help line.

    ``apply_size`` recomputes the body area and re-applies the content,
    so the text always reflows to the current terminal size.
    """

    DEFAULT_CSS = """
    DetailPanel {
        border: round $accent;
        padding: 0 1;
    }
    DetailPanel > #detail-title {
        text-style: bold;
        height: 1;
    }
    DetailPanel > #detail-help {
        color: $text-muted;
        height: 1;
    }
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._title = ""
        self._content = ""
        self._content_width = 0
        self._content_height = 0
        self.display = False

    def compose(self) -> ComposeResult:
        yield Static("", id="detail-title")
        with VerticalScroll(id="detail-scroll"):
            yield Static("", id="detail-content", markup=False)
        yield Static(escape(DETAIL_HELP_TEXT), id="detail-help")

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> str:
        return self._content

    @property
    def content_size(self) -> tuple[int, int]:
        return self._content_width, self._content_height

    def show(self, title: str, content: str) -> None:
        self._title = title
        self._content = content
        self.display = True
        self._apply_content()
        self.scroll_to_top()

    def hide(self) -> None:
        self.display = False

    def apply_size(self, width: int, height: int) -> None:
        self._content_width = max(1, width - 2)
        self._content_height = max(MIN_CONTENT_HEIGHT, height - DETAIL_CHROME_HEIGHT)
        with suppress(NoMatches, WrongType):
            self.query_one("#detail-scroll", VerticalScroll).styles.height = self._content_height
        self._apply_content()

    def _apply_content(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#detail-title", Static).update(escape(self._title))
            self.query_one("#detail-content", Static).update(self._content)

    # =========================================================================
    # Scrolling
    # =========================================================================

    def _scroller(self) -> VerticalScroll | None:
        with suppress(NoMatches, WrongType):
            return self.query_one("#detail-scroll", VerticalScroll)
        return None

    def scroll_line(self, delta: int) -> None:
        scroller = self._scroller()
        if scroller is not None:
            scroller.scroll_relative(y=delta, animate=False)

    def scroll_to_top(self) -> None:
        scroller = self._scroller()
        if scroller is not None:
            scroller.scroll_home(animate=False)

    def scroll_to_bottom(self) -> None:
        scroller = self._scroller()
        if scroller is not None:
            scroller.scroll_end(animate=False)
