"""Table widgets for the k4a TUI."""

from k4a.widgets.data.tables.resource_table import ResourceTable

__all__ = ["ResourceTable"]
