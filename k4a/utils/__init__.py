"""Utility functions and classes for the k4a TUI."""

from k4a.utils.debug_log import DebugLog
from k4a.utils.formatting import (
    display_api,
    format_duration,
    format_retention,
    truncate_string,
)
from k4a.utils.resource_parser import (
    extract_string,
    extract_value,
    filter_resources,
    resource_name,
)

__all__ = [
    # Logging
    "DebugLog",
    # Formatting
    "display_api",
    # Resource documents
    "extract_string",
    "extract_value",
    "filter_resources",
    "format_duration",
    "format_retention",
    "resource_name",
    "truncate_string",
]
