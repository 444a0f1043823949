"""Disk cache for raw kafkactl output."""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
import time
from collections.abc import Sequence
from contextlib import suppress
from pathlib import Path

from k4a.constants.defaults import CACHE_DIR_DEFAULT, CACHE_FILE_SUFFIX

logger = logging.getLogger(__name__)


class CacheError(Exception):
    """Raised when a cache entry cannot be written or removed."""


class DiskCache:
    """Age-based cache of raw payloads keyed by (kind, arguments).

    Each entry is a single file named by the SHA-256 of
    ``"<kind>_<arg1>_<arg2>..."`` (prefixed with ``"<scope>:"`` when a scope
    is set), holding the payload verbatim. Freshness is derived from the
    file's modification time at read time; no expiry is stored.

    Notes:
    - Reads never raise. A missing, unreadable or expired entry is a miss.
    - Writes go to a temporary file that is renamed over the entry, so a
      reader never sees a partially written payload.
    - There is no locking. Concurrent writers of the same key are
      last-write-wins.
    """

    def __init__(self, cache_dir: Path | None = None, scope: str = "") -> None:
        """Initialize the cache and create its directory.

        Args:
            cache_dir: Directory holding cache files. Defaults to
                ``~/.local/k4a/cache``.
            scope: Optional key prefix, normally the current context name.

        Raises:
            CacheError: If the directory cannot be created.
        """
        self._cache_dir = Path(cache_dir) if cache_dir is not None else CACHE_DIR_DEFAULT
        self._scope = scope
        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheError(f"failed to create cache directory: {e}") from e

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    @property
    def scope(self) -> str:
        return self._scope

    def set_scope(self, scope: str) -> None:
        """Scope subsequent keys to ``scope`` (e.g. a new context name)."""
        self._scope = scope

    # =========================================================================
    # Keys
    # =========================================================================

    def cache_key(self, kind: str, args: Sequence[str] = ()) -> str:
        """Return the hex digest identifying (scope, kind, args)."""
        key = f"{self._scope}:{kind}" if self._scope else kind
        for arg in args:
            key += "_" + arg
        return hashlib.sha256(key.encode("utf-8")).hexdigest()

    def path_for(self, kind: str, args: Sequence[str] = ()) -> Path:
        """Return the file path of the entry for (kind, args)."""
        return self._cache_dir / (self.cache_key(kind, args) + CACHE_FILE_SUFFIX)

    # =========================================================================
    # Read / write
    # =========================================================================

    def get(
        self,
        kind: str,
        args: Sequence[str] = (),
        max_age: float = float("inf"),
    ) -> tuple[bytes | None, bool]:
        """Return ``(payload, True)`` if an entry exists and is at most ``max_age`` seconds old.

        Any failure is reported as a miss: ``(None, False)``.
        """
        path = self.path_for(kind, args)
        try:
            age = time.time() - path.stat().st_mtime
            if age > max_age:
                return None, False
            return path.read_bytes(), True
        except FileNotFoundError:
            return None, False
        except OSError as e:
            logger.debug(f"Cache read failed for {kind} {list(args)}: {e}")
            return None, False

    def set(self, kind: str, args: Sequence[str], payload: bytes) -> None:
        """Store ``payload`` for (kind, args), replacing any previous entry.

        Raises:
            CacheError: If the payload cannot be written.
        """
        path = self.path_for(kind, args)
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self._cache_dir, prefix=".tmp-", suffix=CACHE_FILE_SUFFIX)
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise CacheError(f"failed to write cache file: {e}") from e
        finally:
            if tmp_name is not None:
                with suppress(OSError):
                    os.unlink(tmp_name)

    def age(self, kind: str, args: Sequence[str] = ()) -> float | None:
        """Return seconds since the entry was written, or ``None`` if it does not exist."""
        try:
            return time.time() - self.path_for(kind, args).stat().st_mtime
        except OSError:
            return None

    # =========================================================================
    # Invalidation
    # =========================================================================

    def invalidate(self, kind: str, args: Sequence[str] = ()) -> None:
        """Remove the entry for (kind, args). A missing entry is not an error.

        Raises:
            CacheError: If an existing entry cannot be removed.
        """
        try:
            self.path_for(kind, args).unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise CacheError(f"failed to remove cache file: {e}") from e

    def invalidate_all(self) -> None:
        """Remove every entry in the cache directory.

        Raises:
            CacheError: If the directory cannot be listed or a file cannot be removed.
        """
        try:
            entries = list(self._cache_dir.iterdir())
        except FileNotFoundError:
            return
        except OSError as e:
            raise CacheError(f"failed to read cache directory: {e}") from e

        for entry in entries:
            if entry.is_dir():
                continue
            try:
                entry.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                raise CacheError(f"failed to remove cache file {entry.name}: {e}") from e


__all__ = [
    "CacheError",
    "DiskCache",
]
