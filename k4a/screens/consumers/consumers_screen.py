"""Consumers screen."""

from __future__ import annotations

from k4a.constants.enums import ViewName
from k4a.screens.base_screen import ResourceScreen
from k4a.screens.consumers.presenter import ConsumersPresenter


class ConsumersScreen(ResourceScreen):
    """All consumer groups of the namespace."""

    view_name = ViewName.CONSUMERS
    presenter_class = ConsumersPresenter
