"""Scalar constants (strings) for the TUI."""

from typing import Final

APP_TITLE: Final = "k4a"
KAFKACTL_BINARY: Final = "kafkactl"
OUTPUT_FORMAT_ARGS: Final = ("-o", "yaml")

# ============================================================================
# Command prompt
# ============================================================================

COMMAND_PROMPT: Final = ":"
FILTER_PROMPT: Final = "/"
COMMAND_PLACEHOLDER: Final = "Enter command (topics, schemas, connectors, quit)..."
FILTER_PLACEHOLDER: Final = "Filter by name (empty clears)..."
QUIT_COMMANDS: Final = frozenset({"q", "quit"})

# ============================================================================
# Status text
# ============================================================================

STATUS_NONE: Final = "-"
DETAIL_HELP_TEXT: Final = "↑/↓ navigate • g/G top/bottom • ESC back"

__all__ = [
    "APP_TITLE",
    "COMMAND_PLACEHOLDER",
    "COMMAND_PROMPT",
    "DETAIL_HELP_TEXT",
    "FILTER_PLACEHOLDER",
    "FILTER_PROMPT",
    "KAFKACTL_BINARY",
    "OUTPUT_FORMAT_ARGS",
    "QUIT_COMMANDS",
    "STATUS_NONE",
]
