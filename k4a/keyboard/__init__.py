"""Keyboard bindings module.

Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- views: Resource view and help bindings, plus footer hints
"""

from k4a.keyboard.app import APP_BINDINGS
from k4a.keyboard.views import (
    CONNECTORS_FOOTER_HINTS,
    CONNECTORS_SCREEN_BINDINGS,
    HELP_SCREEN_BINDINGS,
    OVERLAY_FOOTER_HINTS,
    PROMPT_FOOTER_HINTS,
    RESOURCE_FOOTER_HINTS,
    RESOURCE_SCREEN_BINDINGS,
    TOPICS_FOOTER_HINTS,
)

__all__ = [
    "APP_BINDINGS",
    "CONNECTORS_FOOTER_HINTS",
    "CONNECTORS_SCREEN_BINDINGS",
    "HELP_SCREEN_BINDINGS",
    "OVERLAY_FOOTER_HINTS",
    "PROMPT_FOOTER_HINTS",
    "RESOURCE_FOOTER_HINTS",
    "RESOURCE_SCREEN_BINDINGS",
    "TOPICS_FOOTER_HINTS",
]
