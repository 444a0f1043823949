"""Default values for settings and storage locations."""

from pathlib import Path
from typing import Final

# ============================================================================
# Cache defaults
# ============================================================================

# Cached payloads younger than this are served without running kafkactl.
REFRESH_INTERVAL_DEFAULT: Final = 600.0  # seconds

CACHE_DIR_DEFAULT: Final = Path.home() / ".local" / "k4a" / "cache"
CACHE_FILE_SUFFIX: Final = ".yaml"

# ============================================================================
# Configuration defaults
# ============================================================================

CONFIG_ENV_VAR: Final = "KAFKACTL_CONFIG"
CONFIG_PATH_DEFAULT: Final = Path.home() / ".kafkactl" / "config.yml"
CONFIG_ROOT_KEY: Final = "kafkactl"

# ============================================================================
# Logging defaults
# ============================================================================

DEBUG_LOG_PATH_DEFAULT: Final = Path.home() / ".local" / "k4a" / "debug.log"

__all__ = [
    "CACHE_DIR_DEFAULT",
    "CACHE_FILE_SUFFIX",
    "CONFIG_ENV_VAR",
    "CONFIG_PATH_DEFAULT",
    "CONFIG_ROOT_KEY",
    "DEBUG_LOG_PATH_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
]
