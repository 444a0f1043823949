"""CustomFooter widget - keybinding hints and a transient status message."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import Static

from k4a.constants.limits import FOOTER_HEIGHT


class CustomFooter(Static):
    """Footer rendering ``key desc`` hints followed by an optional message."""

    DEFAULT_CSS = f"""
    CustomFooter {{
        height: {FOOTER_HEIGHT};
        width: 1fr;
        padding: 0 1;
        background: $panel;
        color: $text-muted;
    }}
    """

    def __init__(self, hints: list[tuple[str, str]] | None = None, *, id: str | None = None) -> None:
        super().__init__("", id=id, markup=True)
        self._hints: list[tuple[str, str]] = list(hints or [])
        self._message = ""
        self._is_error = False

    @property
    def message(self) -> str:
        return self._message

    @property
    def hints(self) -> list[tuple[str, str]]:
        return list(self._hints)

    def on_mount(self) -> None:
        self._render_footer()

    def set_hints(self, hints: list[tuple[str, str]]) -> None:
        self._hints = list(hints)
        self._render_footer()

    def set_message(self, message: str, *, error: bool = False) -> None:
        self._message = message
        self._is_error = error
        self._render_footer()

    def clear_message(self) -> None:
        self.set_message("")

    def render_text(self) -> str:
        """Return the footer as markup."""
        keys_line = "  ".join(
            f"[bold yellow]{escape(key)}[/bold yellow] {escape(desc)}" for key, desc in self._hints
        )
        if not self._message:
            return keys_line
        color = "red" if self._is_error else "orange1"
        return f"{keys_line}\n[{color}]{escape(self._message)}[/{color}]"

    def _render_footer(self) -> None:
        self.update(self.render_text())
