"""Display widgets for the k4a TUI."""

from k4a.widgets.display.detail_panel import DetailPanel
from k4a.widgets.display.status_dot import STATUS_DOT, status_color, status_dot

__all__ = [
    "STATUS_DOT",
    "DetailPanel",
    "status_color",
    "status_dot",
]
