"""Application state: kafkactl configuration, contexts and view state."""

from k4a.models.state.config_manager import (
    ConfigError,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
    Context,
    ContextDetails,
    ContextNotFoundError,
    KafkactlConfig,
)
from k4a.models.state.context_manager import ContextManager
from k4a.models.state.view_state import DEFAULT_OVERLAYS, SequenceGuard, ViewState

__all__ = [
    "DEFAULT_OVERLAYS",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "Context",
    "ContextDetails",
    "ContextManager",
    "ContextNotFoundError",
    "KafkactlConfig",
    "SequenceGuard",
    "ViewState",
]
