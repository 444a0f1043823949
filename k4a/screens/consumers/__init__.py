"""Consumers screen package."""

from k4a.screens.consumers.consumers_screen import ConsumersScreen
from k4a.screens.consumers.presenter import ConsumersPresenter, consumer_group_cells

__all__ = ["ConsumersPresenter", "ConsumersScreen", "consumer_group_cells"]
