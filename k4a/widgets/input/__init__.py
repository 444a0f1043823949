"""Input widgets for the k4a TUI."""

from k4a.widgets.input.command_bar import CommandBar

__all__ = ["CommandBar"]
