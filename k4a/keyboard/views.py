"""Resource view keyboard bindings.

Views are Screens, so these bindings are checked after the focused
widget and before the app. Printable keys never reach them while the
prompt Input has focus.
"""

from typing import Annotated

# ============================================================================
# Common resource view bindings
# ============================================================================

RESOURCE_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "back", "Back"),
    ("q", "back_or_quit", "Quit"),
    ("colon", "open_command", "Command"),
    ("slash", "open_filter", "Filter"),
    ("j", "cursor_down", "Down"),
    ("k", "cursor_up", "Up"),
    ("g", "cursor_top", "Top"),
    ("G", "cursor_bottom", "Bottom"),
    ("r", "refresh", "Refresh"),
    ("R", "force_refresh", "Force refresh"),
    ("ctrl+r", "force_refresh", "Force refresh"),
    ("d", "describe", "Describe"),
]

# ============================================================================
# Connectors view bindings
# ============================================================================

CONNECTORS_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    *RESOURCE_SCREEN_BINDINGS,
    ("p", "connector_action('pause')", "Pause"),
    ("s", "connector_action('resume')", "Resume"),
    ("t", "connector_action('restart')", "Restart"),
]

# ============================================================================
# Help overlay bindings
# ============================================================================

HELP_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "dismiss_help", "Close"),
    ("q", "dismiss_help", "Close"),
]

# ============================================================================
# Footer hints per view
# ============================================================================

RESOURCE_FOOTER_HINTS: list[tuple[str, str]] = [
    ("↑↓/jk", "navigate"),
    ("d", "describe"),
    ("r/R", "refresh/force"),
    ("/", "filter"),
    (":", "command"),
    ("?", "help"),
    ("q", "quit"),
]

TOPICS_FOOTER_HINTS: list[tuple[str, str]] = [
    ("↑↓/jk", "navigate"),
    ("enter", "consumers"),
    ("d", "describe"),
    ("r/R", "refresh/force"),
    ("/", "filter"),
    (":", "command"),
    ("?", "help"),
    ("q", "quit"),
]

CONNECTORS_FOOTER_HINTS: list[tuple[str, str]] = [
    ("↑↓/jk", "navigate"),
    ("d", "describe"),
    ("p", "pause"),
    ("s", "resume"),
    ("t", "restart"),
    ("r/R", "refresh/force"),
    (":", "command"),
    ("?", "help"),
]

OVERLAY_FOOTER_HINTS: list[tuple[str, str]] = [
    ("↑↓/jk", "navigate"),
    ("g/G", "top/bottom"),
    ("esc", "back"),
]

PROMPT_FOOTER_HINTS: list[tuple[str, str]] = [
    ("enter", "submit"),
    ("esc", "cancel"),
]

__all__ = [
    "CONNECTORS_FOOTER_HINTS",
    "CONNECTORS_SCREEN_BINDINGS",
    "HELP_SCREEN_BINDINGS",
    "OVERLAY_FOOTER_HINTS",
    "PROMPT_FOOTER_HINTS",
    "RESOURCE_FOOTER_HINTS",
    "RESOURCE_SCREEN_BINDINGS",
    "TOPICS_FOOTER_HINTS",
]
