"""Help screen package."""

from k4a.screens.help.help_screen import HelpScreen, render_help

__all__ = ["HelpScreen", "render_help"]
