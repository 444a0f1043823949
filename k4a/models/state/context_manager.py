"""Active context bookkeeping on top of the kafkactl configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from k4a.models.state.config_manager import (
    ConfigManager,
    ContextNotFoundError,
    KafkactlConfig,
)

logger = logging.getLogger(__name__)


class ContextManager:
    """Switch contexts and namespaces, persisting each change.

    A failed save restores the previous in-memory value before the
    ``ConfigSaveError`` propagates.
    """

    def __init__(self, config: KafkactlConfig, config_path: Path | None = None) -> None:
        self._config = config
        self._config_path = config_path

    @property
    def config(self) -> KafkactlConfig:
        return self._config

    @property
    def current_context_name(self) -> str:
        return self._config.current_context

    def list_contexts(self) -> list[str]:
        return self._config.context_names()

    def get_current_namespace(self) -> str:
        try:
            return self._config.get_current_context().context.namespace
        except ContextNotFoundError:
            return ""

    def get_current_api(self) -> str:
        try:
            return self._config.get_current_context().context.api
        except ContextNotFoundError:
            return ""

    def switch_context(self, name: str) -> None:
        """Make ``name`` the current context and save the configuration.

        Raises:
            ContextNotFoundError: If no context is called ``name``.
            ConfigSaveError: If the configuration cannot be saved.
        """
        if self._config.find_context(name) is None:
            raise ContextNotFoundError(f"context {name} not found")
        previous = self._config.current_context
        self._config.current_context = name
        try:
            ConfigManager.save(self._config, self._config_path)
        except Exception:
            self._config.current_context = previous
            raise
        logger.info(f"Switched context from {previous} to {name}")

    def set_namespace(self, namespace: str) -> None:
        """Set the namespace of the current context and save the configuration.

        Raises:
            ContextNotFoundError: If the current context does not exist.
            ConfigSaveError: If the configuration cannot be saved.
        """
        ctx = self._config.get_current_context()
        previous = ctx.context.namespace
        ctx.context.namespace = namespace
        try:
            ConfigManager.save(self._config, self._config_path)
        except Exception:
            ctx.context.namespace = previous
            raise
        logger.info(f"Namespace of {ctx.name} set to {namespace}")


__all__ = ["ContextManager"]
