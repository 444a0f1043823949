"""Constants module for the k4a TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar string constants
- limits.py: Layout sizes and truncation limits
- defaults.py: Default values and storage locations

Note: Keyboard bindings are defined in the k4a.keyboard module.
"""

from k4a.constants.defaults import (
    CACHE_DIR_DEFAULT,
    CACHE_FILE_SUFFIX,
    CONFIG_ENV_VAR,
    CONFIG_PATH_DEFAULT,
    CONFIG_ROOT_KEY,
    DEBUG_LOG_PATH_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from k4a.constants.enums import (
    CommandKind,
    ConnectorAction,
    OverlayMode,
    PromptMode,
    ResourceKind,
    ViewName,
    ViewPhase,
)
from k4a.constants.limits import (
    API_DISPLAY_MAX,
    COMMAND_CHAR_LIMIT,
    DETAIL_CHROME_HEIGHT,
    FOOTER_HEIGHT,
    HEADER_HEIGHT,
    MIN_CONTENT_HEIGHT,
    TABLE_CHROME_HEIGHT,
)
from k4a.constants.values import (
    APP_TITLE,
    COMMAND_PLACEHOLDER,
    COMMAND_PROMPT,
    DETAIL_HELP_TEXT,
    FILTER_PLACEHOLDER,
    FILTER_PROMPT,
    KAFKACTL_BINARY,
    OUTPUT_FORMAT_ARGS,
    QUIT_COMMANDS,
    STATUS_NONE,
)

__all__ = [
    "API_DISPLAY_MAX",
    "APP_TITLE",
    "CACHE_DIR_DEFAULT",
    "CACHE_FILE_SUFFIX",
    "COMMAND_CHAR_LIMIT",
    "COMMAND_PLACEHOLDER",
    "COMMAND_PROMPT",
    "CONFIG_ENV_VAR",
    "CONFIG_PATH_DEFAULT",
    "CONFIG_ROOT_KEY",
    "DEBUG_LOG_PATH_DEFAULT",
    "DETAIL_CHROME_HEIGHT",
    "DETAIL_HELP_TEXT",
    "FILTER_PLACEHOLDER",
    "FILTER_PROMPT",
    "FOOTER_HEIGHT",
    "HEADER_HEIGHT",
    "KAFKACTL_BINARY",
    "MIN_CONTENT_HEIGHT",
    "OUTPUT_FORMAT_ARGS",
    "QUIT_COMMANDS",
    "REFRESH_INTERVAL_DEFAULT",
    "STATUS_NONE",
    "TABLE_CHROME_HEIGHT",
    "CommandKind",
    "ConnectorAction",
    "OverlayMode",
    "PromptMode",
    "ResourceKind",
    "ViewName",
    "ViewPhase",
]
