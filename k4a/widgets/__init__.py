"""Widgets module for the k4a TUI.

This module provides all reusable widgets organized into submodules:
- data: Data display widgets (ResourceTable)
- display: Display widgets (DetailPanel, status_dot)
- input: Input widgets (CommandBar)
- structure: Structure widgets (CustomFooter, CustomHeader)
"""

# Data display widgets
from k4a.widgets.data import ResourceTable

# Display widgets
from k4a.widgets.display import (
    STATUS_DOT,
    DetailPanel,
    status_color,
    status_dot,
)

# Input widgets
from k4a.widgets.input import CommandBar

# Structure widgets
from k4a.widgets.structure import (
    LOGO_LINES,
    CustomFooter,
    CustomHeader,
)

__all__ = [
    "LOGO_LINES",
    "STATUS_DOT",
    "CommandBar",
    "CustomFooter",
    "CustomHeader",
    "DetailPanel",
    "ResourceTable",
    "status_color",
    "status_dot",
]
