"""Text formatting helpers for table cells and chrome."""

from __future__ import annotations

from k4a.constants.limits import API_DISPLAY_MAX


def format_duration(ms: int) -> str:
    """Format a millisecond duration as ``ms``, ``s``, ``m``, ``h`` or ``d``."""
    seconds = ms / 1000
    if seconds < 1:
        return f"{ms}ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    if seconds < 3600:
        return f"{seconds / 60:.1f}m"
    if seconds < 86400:
        return f"{seconds / 3600:.1f}h"
    return f"{seconds / 86400:.1f}d"


def truncate_string(value: str, max_len: int) -> str:
    """Truncate ``value`` to ``max_len`` characters, ending with ``...`` when room allows."""
    if len(value) <= max_len:
        return value
    if max_len <= 3:
        return value[:max_len]
    return value[: max_len - 3] + "..."


def display_api(api: str) -> str:
    """Strip the URL scheme from an API endpoint and bound its width."""
    for prefix in ("https://", "http://"):
        if api.startswith(prefix):
            api = api[len(prefix):]
            break
    return truncate_string(api, API_DISPLAY_MAX)


def format_retention(value: object) -> str:
    """Render a ``retention.ms`` value as a human duration, passing through non-numeric text."""
    try:
        ms = int(str(value))
    except (TypeError, ValueError):
        return str(value)
    if ms < 0:
        return "infinite"
    return format_duration(ms)


__all__ = [
    "display_api",
    "format_duration",
    "format_retention",
    "truncate_string",
]
