"""Unit tests for header, footer, status dot and help rendering."""

from __future__ import annotations

from rich.text import Text

from k4a.screens.help.help_screen import render_help
from k4a.widgets.display.status_dot import STATUS_DOT, status_color, status_dot
from k4a.widgets.structure.custom_footer import CustomFooter
from k4a.widgets.structure.custom_header import LOGO_LINES, CustomHeader


class TestStatusDot:
    def test_colors(self) -> None:
        assert status_color("RUNNING") == "green"
        assert status_color("PAUSED") == "orange1"
        assert status_color("FAILED") == "red"
        assert status_color("UNASSIGNED") == "grey50"
        assert status_color("running") == "grey50"

    def test_markup(self) -> None:
        markup = status_dot("RUNNING")
        assert markup == f"[green]{STATUS_DOT}[/green]"
        assert Text.from_markup(markup).plain == STATUS_DOT


class TestCustomHeader:
    def test_render_lines(self) -> None:
        header = CustomHeader(context="dev", namespace="team-a", api="https://ns4kafka.example.com", view="topics")
        lines = header.render_lines()
        assert len(lines) == len(LOGO_LINES)
        plain = Text.from_markup("\n".join(lines)).plain
        assert "dev" in plain
        assert "team-a" in plain
        assert "ns4kafka.example.com" in plain
        assert "https://" not in plain
        assert ":topics" in plain

    def test_values_are_escaped(self) -> None:
        header = CustomHeader(context="[red]ctx", view="topics")
        plain = Text.from_markup("\n".join(header.render_lines())).plain
        assert "[red]ctx" in plain


class TestCustomFooter:
    def test_hints_only(self) -> None:
        footer = CustomFooter([("q", "quit"), ("?", "help")])
        assert Text.from_markup(footer.render_text()).plain == "q quit  ? help"

    def test_message_on_second_line(self) -> None:
        footer = CustomFooter([("q", "quit")])
        footer._message = "Unknown command: bogus"
        footer._is_error = True
        text = footer.render_text()
        assert text.endswith("[red]Unknown command: bogus[/red]")
        assert Text.from_markup(text).plain.splitlines()[1] == "Unknown command: bogus"


def test_render_help_lists_commands() -> None:
    plain = Text.from_markup(render_help()).plain
    assert plain.startswith("K4A Help")
    for entry in (":topics", ":ctx <name>", "Pause connector", "Toggle this help"):
        assert entry in plain
