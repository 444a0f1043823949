"""Controllers for the k4a TUI."""

from k4a.controllers.base import BaseController
from k4a.controllers.kafkactl import (
    KafkactlClient,
    KafkactlCommandError,
    KafkactlError,
)

__all__ = [
    "BaseController",
    "KafkactlClient",
    "KafkactlCommandError",
    "KafkactlError",
]
