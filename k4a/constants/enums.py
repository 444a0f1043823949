"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Resource Enums
# =============================================================================


class ResourceKind(str, Enum):
    """Resource kinds understood by ``kafkactl get``."""

    TOPICS = "topics"
    SCHEMAS = "schemas"
    CONNECTORS = "connectors"
    CONSUMER_GROUPS = "consumer-groups"
    ACLS = "acls"


class ConnectorAction(str, Enum):
    """Mutating actions available on a connector."""

    PAUSE = "pause"
    RESUME = "resume"
    RESTART = "restart"


# =============================================================================
# View State Enums
# =============================================================================


class ViewName(str, Enum):
    """Views the application controller can switch between."""

    TOPICS = "topics"
    SCHEMAS = "schemas"
    CONNECTORS = "connectors"
    CONSUMERS = "consumers"
    ACLS = "acls"


class ViewPhase(Enum):
    """Data phase of a resource view."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class OverlayMode(Enum):
    """Modal sub-view currently owning input inside a resource view."""

    NONE = "none"
    DETAIL = "detail"
    CONSUMER_GROUPS = "consumer-groups"


class PromptMode(Enum):
    """What the bottom prompt is collecting."""

    COMMAND = "command"
    FILTER = "filter"


class CommandKind(Enum):
    """Kinds of command accepted by the ``:`` prompt."""

    EMPTY = "empty"
    VIEW = "view"
    QUIT = "quit"
    HELP = "help"
    CONTEXT = "context"
    NAMESPACE = "namespace"
    CACHE_CLEAR = "cache-clear"
    UNKNOWN = "unknown"


__all__ = [
    "CommandKind",
    "ConnectorAction",
    "OverlayMode",
    "PromptMode",
    "ResourceKind",
    "ViewName",
    "ViewPhase",
]
