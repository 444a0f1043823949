"""Connectors screen package."""

from k4a.screens.connectors.connectors_screen import ConnectorsScreen
from k4a.screens.connectors.presenter import ConnectorsPresenter

__all__ = ["ConnectorsPresenter", "ConnectorsScreen"]
