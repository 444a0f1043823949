"""CustomHeader widget - logo and context summary shown above every view."""

from __future__ import annotations

import time

from rich.markup import escape
from textual.widgets import Static

from k4a.constants.limits import HEADER_HEIGHT
from k4a.utils.formatting import display_api

LOGO_LINES: tuple[str, ...] = (
    r" ____  __.  _____         ",
    r"|    |/ _| /  |  |_____   ",
    r"|      <  /   |  |\__  \  ",
    r"|    |  \/    ^   // __ \_ ",
    r"|____|__ \____   |(____  / ",
    r"        \/    |__|     \/  ",
)

_LOGO_PADDING = 3


class CustomHeader(Static):
    """Six-line header: logo on the left, context details on the right.

    Shows context, namespace, API endpoint (scheme stripped, truncated),
    the active view and a wall clock refreshed every second.
    """

    DEFAULT_CSS = f"""
    CustomHeader {{
        height: {HEADER_HEIGHT};
        width: 1fr;
    }}
    """

    def __init__(
        self,
        context: str = "",
        namespace: str = "",
        api: str = "",
        view: str = "",
        *,
        id: str | None = None,
    ) -> None:
        super().__init__("", id=id, markup=True)
        self._context = context
        self._namespace = namespace
        self._api = api
        self._view = view

    def on_mount(self) -> None:
        self._render_header()
        self.set_interval(1.0, self._render_header)

    def set_info(
        self,
        *,
        context: str | None = None,
        namespace: str | None = None,
        api: str | None = None,
        view: str | None = None,
    ) -> None:
        if context is not None:
            self._context = context
        if namespace is not None:
            self._namespace = namespace
        if api is not None:
            self._api = api
        if view is not None:
            self._view = view
        self._render_header()

    def render_lines(self) -> list[str]:
        """Return the header as markup lines."""
        info = [
            f"[dim]Context:  [/dim] {escape(self._context)}",
            f"[dim]Namespace:[/dim] {escape(self._namespace)}",
            f"[dim]API:      [/dim] {escape(display_api(self._api))}",
            f"[dim]View:     [/dim] [bold]:{escape(self._view)}[/bold]",
            f"[dim]Time:     [/dim] {time.strftime('%H:%M:%S')}",
        ]
        lines = []
        for index, logo_line in enumerate(LOGO_LINES[:HEADER_HEIGHT]):
            line = f"[bold cyan]{escape(logo_line)}[/bold cyan]" + " " * _LOGO_PADDING
            if index < len(info):
                line += info[index]
            lines.append(line)
        return lines

    def _render_header(self) -> None:
        self.update("\n".join(self.render_lines()))
