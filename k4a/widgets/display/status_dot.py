"""Colored status dot for resource states."""

from __future__ import annotations

STATUS_DOT = "●"

_STATE_COLORS: dict[str, str] = {
    "RUNNING": "green",
    "ACTIVE": "green",
    "SUCCESS": "green",
    "PAUSED": "orange1",
    "PENDING": "orange1",
    "WARNING": "orange1",
    "FAILED": "red",
    "ERROR": "red",
    "DELETED": "red",
}
_MUTED_COLOR = "grey50"


def status_color(state: str) -> str:
    """Return the Rich color name for ``state`` (exact, upper-case match)."""
    return _STATE_COLORS.get(state, _MUTED_COLOR)


def status_dot(state: str) -> str:
    """Return the dot as Rich markup colored by ``state``."""
    color = status_color(state)
    return f"[{color}]{STATUS_DOT}[/{color}]"


__all__ = ["STATUS_DOT", "status_color", "status_dot"]
