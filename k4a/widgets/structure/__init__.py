"""Structure widgets for the k4a TUI.

This module provides structural layout widgets:
- CustomFooter: Footer widget
- CustomHeader: Header widget
"""

from k4a.widgets.structure.custom_footer import CustomFooter
from k4a.widgets.structure.custom_header import LOGO_LINES, CustomHeader

__all__ = [
    "LOGO_LINES",
    "CustomFooter",
    "CustomHeader",
]
