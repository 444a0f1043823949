"""kafkactl client - subprocess invocation with a read/write-through disk cache."""

from __future__ import annotations

import asyncio
import logging
import subprocess
import time
from collections.abc import Sequence

from k4a.constants.defaults import REFRESH_INTERVAL_DEFAULT
from k4a.constants.enums import ConnectorAction, ResourceKind
from k4a.constants.values import KAFKACTL_BINARY, OUTPUT_FORMAT_ARGS
from k4a.controllers.base.base_controller import BaseController
from k4a.controllers.kafkactl.parsers.yaml_parser import parse_yaml_documents
from k4a.models.cache.disk_cache import CacheError, DiskCache
from k4a.models.resource import ResourceRecord

logger = logging.getLogger(__name__)


class KafkactlError(Exception):
    """Base exception for kafkactl failures."""


class KafkactlCommandError(KafkactlError):
    """Raised when kafkactl cannot be started or exits non-zero."""

    def __init__(self, args: Sequence[str], stderr: str = "", returncode: int | None = None) -> None:
        self.command_args = tuple(args)
        self.stderr = stderr
        self.returncode = returncode
        reason = f"exit status {returncode}" if returncode is not None else "could not run"
        message = f"kafkactl command failed: {reason}"
        if stderr:
            message += f", stderr: {stderr}"
        super().__init__(message)


class KafkactlClient(BaseController):
    """Runs kafkactl and caches its raw YAML output on disk.

    A non-forced ``fetch`` is served from the cache while the entry is
    younger than ``refresh_interval``. Otherwise kafkactl is run and its
    stdout is written to the cache before decoding. A failed command
    leaves the cache untouched.
    """

    def __init__(
        self,
        cache: DiskCache,
        refresh_interval: float = REFRESH_INTERVAL_DEFAULT,
        binary: str = KAFKACTL_BINARY,
    ) -> None:
        self._cache = cache
        self._refresh_interval = refresh_interval
        self._binary = binary

    @property
    def cache(self) -> DiskCache:
        return self._cache

    @property
    def refresh_interval(self) -> float:
        return self._refresh_interval

    def set_scope(self, context_name: str) -> None:
        """Scope cache keys to ``context_name``."""
        self._cache.set_scope(context_name)

    # =========================================================================
    # Subprocess
    # =========================================================================

    def _run_sync(self, args: Sequence[str]) -> bytes:
        """Run kafkactl synchronously (thread-safe wrapper target)."""
        cmd = [self._binary, *args]
        start = time.monotonic()
        try:
            result = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as e:
            logger.error(f"Failed to run {' '.join(cmd)}: {e}")
            raise KafkactlCommandError(args, str(e)) from e
        duration_ms = (time.monotonic() - start) * 1000
        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            logger.warning(f"{' '.join(cmd)} exited {result.returncode} after {duration_ms:.0f}ms: {stderr}")
            raise KafkactlCommandError(args, stderr, result.returncode)
        logger.debug(f"{' '.join(cmd)} finished in {duration_ms:.0f}ms ({len(result.stdout)} bytes)")
        return result.stdout

    def execute_sync(self, *args: str) -> str:
        """Run kafkactl with ``args`` and return stdout. Never cached."""
        return self._run_sync(args).decode("utf-8", errors="replace")

    async def execute(self, *args: str) -> str:
        return await asyncio.to_thread(self.execute_sync, *args)

    # =========================================================================
    # Resources
    # =========================================================================

    def fetch_sync(
        self,
        kind: str,
        args: Sequence[str] = (),
        force_refresh: bool = False,
    ) -> list[ResourceRecord]:
        """Return the decoded resources of ``kind``, from cache when fresh.

        Raises:
            KafkactlCommandError: If kafkactl has to run and fails.
        """
        args = tuple(args)
        if not force_refresh:
            payload, hit = self._cache.get(kind, args, self._refresh_interval)
            if hit and payload is not None:
                logger.debug(f"Cache hit for {kind} {list(args)}")
                return parse_yaml_documents(payload)

        payload = self._run_sync(("get", kind, *args, *OUTPUT_FORMAT_ARGS))
        try:
            self._cache.set(kind, args, payload)
        except CacheError as e:
            logger.warning(f"Failed to cache {kind} {list(args)}: {e}")
        return parse_yaml_documents(payload)

    async def fetch(
        self,
        kind: str,
        args: Sequence[str] = (),
        force_refresh: bool = False,
    ) -> list[ResourceRecord]:
        return await asyncio.to_thread(self.fetch_sync, kind, tuple(args), force_refresh)

    async def fetch_consumer_groups(self, topic: str, force_refresh: bool = False) -> list[ResourceRecord]:
        """Return the consumer groups reading ``topic``."""
        return await self.fetch(ResourceKind.CONSUMER_GROUPS.value, ("--topic", topic), force_refresh)

    async def get_resource_yaml(self, kind: str, name: str) -> str:
        """Return one resource as raw YAML, bypassing the cache."""
        return await self.execute("get", kind, name, *OUTPUT_FORMAT_ARGS)

    async def connector_action(self, action: ConnectorAction | str, name: str) -> str:
        """Pause, resume or restart connector ``name``.

        Raises:
            ValueError: If ``action`` is not a connector action.
            KafkactlCommandError: If kafkactl fails.
        """
        verb = ConnectorAction(action).value
        logger.info(f"Running connector {verb} on {name}")
        return await self.execute("connector", verb, name)

    async def check_connection(self) -> bool:
        try:
            await self.execute("version")
        except KafkactlError as e:
            logger.warning(f"kafkactl is not available: {e}")
            return False
        return True

    def invalidate_cache(self) -> None:
        """Drop every cached payload. Failures are logged, never raised."""
        try:
            self._cache.invalidate_all()
        except CacheError as e:
            logger.error(f"Failed to invalidate cache: {e}")
            return
        logger.info("Cache invalidated")


__all__ = [
    "KafkactlClient",
    "KafkactlCommandError",
    "KafkactlError",
]
