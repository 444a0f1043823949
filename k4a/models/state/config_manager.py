"""kafkactl configuration models and persistence.

The configuration file is shared with kafkactl itself::

    kafkactl:
      current-context: dev
      contexts:
        - name: dev
          context:
            api: https://ns4kafka.dev.example.com
            user-token: ...
            namespace: team-a

Location: ``$KAFKACTL_CONFIG`` or ``~/.kafkactl/config.yml``.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from k4a.constants.defaults import CONFIG_ENV_VAR, CONFIG_PATH_DEFAULT, CONFIG_ROOT_KEY

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when the configuration fails to load."""


class ConfigSaveError(ConfigError):
    """Raised when the configuration fails to save."""


class ContextNotFoundError(ConfigError):
    """Raised when a named context does not exist."""


class ContextDetails(BaseModel):
    """Endpoint, credential and namespace of one context."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    api: str = ""
    user_token: str = Field(default="", alias="user-token")
    namespace: str = ""


class Context(BaseModel):
    """A named cluster/endpoint profile."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    context: ContextDetails = Field(default_factory=ContextDetails)


class KafkactlConfig(BaseModel):
    """The ``kafkactl`` section of the configuration file."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    current_context: str = Field(default="", alias="current-context")
    contexts: list[Context] = Field(default_factory=list)

    def context_names(self) -> list[str]:
        return [ctx.name for ctx in self.contexts]

    def find_context(self, name: str) -> Context | None:
        for ctx in self.contexts:
            if ctx.name == name:
                return ctx
        return None

    def get_current_context(self) -> Context:
        """Return the current context.

        Raises:
            ContextNotFoundError: If ``current_context`` names no known context.
        """
        ctx = self.find_context(self.current_context)
        if ctx is None:
            raise ContextNotFoundError(f"current context {self.current_context} not found")
        return ctx


class ConfigManager:
    """Load and save the kafkactl configuration file."""

    @staticmethod
    def config_path() -> Path:
        """Return the configuration path, honouring ``$KAFKACTL_CONFIG``."""
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return CONFIG_PATH_DEFAULT

    @classmethod
    def load(cls, path: Path | None = None) -> KafkactlConfig:
        """Load the configuration.

        When ``current-context`` is empty the first context becomes current.

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or validated,
                or has no ``kafkactl`` section.
        """
        config_path = path or cls.config_path()
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigLoadError(f"failed to read config file: {e}") from e

        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"failed to parse config: {e}") from e

        section = raw.get(CONFIG_ROOT_KEY) if isinstance(raw, dict) else None
        if not isinstance(section, dict):
            raise ConfigLoadError(f"{CONFIG_ROOT_KEY} configuration not found")

        try:
            config = KafkactlConfig.model_validate(section)
        except ValidationError as e:
            raise ConfigLoadError(f"invalid {CONFIG_ROOT_KEY} configuration: {e}") from e

        if not config.current_context and config.contexts:
            config.current_context = config.contexts[0].name

        logger.debug(f"Loaded config from {config_path}, current context: {config.current_context}")
        return config

    @classmethod
    def save(cls, config: KafkactlConfig, path: Path | None = None) -> None:
        """Rewrite the configuration file atomically.

        Other top-level sections already present in the file are kept.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        config_path = path or cls.config_path()
        document: dict[str, Any] = {}
        with suppress(OSError, yaml.YAMLError):
            existing = yaml.safe_load(config_path.read_text(encoding="utf-8"))
            if isinstance(existing, dict):
                document = existing
        document[CONFIG_ROOT_KEY] = config.model_dump(by_alias=True)

        tmp_name: str | None = None
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            data = yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
            # mkstemp creates the file with mode 0600
            fd, tmp_name = tempfile.mkstemp(dir=config_path.parent, prefix=".config-", suffix=".yml")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(data)
            os.replace(tmp_name, config_path)
            tmp_name = None
        except (OSError, yaml.YAMLError) as e:
            raise ConfigSaveError(f"failed to write config file: {e}") from e
        finally:
            if tmp_name is not None:
                with suppress(OSError):
                    os.unlink(tmp_name)
        logger.debug(f"Saved config to {config_path}")


__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "Context",
    "ContextDetails",
    "ContextNotFoundError",
    "KafkactlConfig",
]
