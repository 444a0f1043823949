"""Help overlay listing keybindings and commands."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

from k4a.keyboard import HELP_SCREEN_BINDINGS
from k4a.screens.help.config import HELP_KEY_WIDTH, HELP_SECTIONS, HELP_TITLE


def render_help() -> str:
    """Return the help text as markup."""
    lines = [f"[bold]{escape(HELP_TITLE)}[/bold]"]
    for title, entries in HELP_SECTIONS:
        lines.append("")
        lines.append(f"[bold cyan]{escape(title)}[/bold cyan]")
        for key, description in entries:
            lines.append(f"  [yellow]{escape(key.ljust(HELP_KEY_WIDTH))}[/yellow] {escape(description)}")
    return "\n".join(lines)


class HelpScreen(ModalScreen[None]):
    """Modal help. ``?``, ``esc`` or ``q`` closes it."""

    BINDINGS = HELP_SCREEN_BINDINGS

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    HelpScreen > #help-panel {
        width: 70;
        max-height: 90%;
        height: auto;
        border: round $accent;
        padding: 1 2;
        background: $surface;
    }
    """

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="help-panel"):
            yield Static(render_help(), id="help-content")

    def action_dismiss_help(self) -> None:
        self.dismiss(None)
