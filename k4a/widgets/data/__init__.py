"""Data display widgets for the k4a TUI."""

from k4a.widgets.data.tables import ResourceTable

__all__ = ["ResourceTable"]
