"""Topics screen package."""

from k4a.screens.topics.presenter import TopicsPresenter
from k4a.screens.topics.topics_screen import TopicsScreen

__all__ = ["TopicsPresenter", "TopicsScreen"]
