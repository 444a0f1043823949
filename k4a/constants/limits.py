"""Limit values (max/min) and layout sizes for the TUI."""

from typing import Final

# ============================================================================
# Layout
# ============================================================================

HEADER_HEIGHT: Final = 6  # logo lines + separator
FOOTER_HEIGHT: Final = 2
TABLE_CHROME_HEIGHT: Final = 2  # column header + border
DETAIL_CHROME_HEIGHT: Final = 4  # title + help line + border
MIN_CONTENT_HEIGHT: Final = 1

# ============================================================================
# Display truncation
# ============================================================================

API_DISPLAY_MAX: Final = 40
COMMAND_CHAR_LIMIT: Final = 100

__all__ = [
    "API_DISPLAY_MAX",
    "COMMAND_CHAR_LIMIT",
    "DETAIL_CHROME_HEIGHT",
    "FOOTER_HEIGHT",
    "HEADER_HEIGHT",
    "MIN_CONTENT_HEIGHT",
    "TABLE_CHROME_HEIGHT",
]
