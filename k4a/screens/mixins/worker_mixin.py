"""WorkerMixin - background fetches and the messages they post back.

Workers never touch view state. They post a message carrying the fetch
sequence number and the screen applies it on the event loop, where the
sequence guard decides whether the result is still current.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.message import Message
from textual.worker import Worker

from k4a.constants.enums import ConnectorAction
from k4a.models.resource import ResourceRecord

logger = logging.getLogger(__name__)


# ============================================================================
# Base Message Classes for Worker Communication
# ============================================================================


class ResourcesLoaded(Message):
    """A view fetch completed.

    Attributes:
        seq: Sequence number issued for the fetch
        records: Decoded resources in source order
        duration_ms: Time taken to fetch in milliseconds
    """

    def __init__(self, seq: int, records: list[ResourceRecord], duration_ms: float = 0.0) -> None:
        super().__init__()
        self.seq = seq
        self.records = records
        self.duration_ms = duration_ms


class ResourcesLoadFailed(Message):
    """A view fetch failed.

    Attributes:
        seq: Sequence number issued for the fetch
        error: Error message describing the failure
    """

    def __init__(self, seq: int, error: str) -> None:
        super().__init__()
        self.seq = seq
        self.error = error


class ConsumerGroupsLoaded(Message):
    """Consumer groups of a topic were fetched."""

    def __init__(self, seq: int, topic: str, records: list[ResourceRecord]) -> None:
        super().__init__()
        self.seq = seq
        self.topic = topic
        self.records = records


class ConsumerGroupsLoadFailed(Message):
    """Consumer groups of a topic could not be fetched."""

    def __init__(self, seq: int, topic: str, error: str) -> None:
        super().__init__()
        self.seq = seq
        self.topic = topic
        self.error = error


class DescribeReady(Message):
    """Describe content for the detail overlay is ready."""

    def __init__(self, title: str, content: str) -> None:
        super().__init__()
        self.title = title
        self.content = content


class ConnectorActionDone(Message):
    """A connector action finished. ``error`` is None on success."""

    def __init__(self, action: ConnectorAction, name: str, output: str = "", error: str | None = None) -> None:
        super().__init__()
        self.action = action
        self.name = name
        self.output = output
        self.error = error


# ============================================================================
# WorkerMixin Base Class
# ============================================================================


class WorkerMixin:
    """Mixin providing worker start/cancel helpers for screens.

    Fetch workers are not exclusive: several may be in flight at once and
    the sequence guard picks the winner when their messages arrive.
    """

    def start_worker(
        self,
        work: Awaitable[Any],
        *,
        name: str | None = None,
        group: str = "default",
    ) -> Worker[Any]:
        """Run ``work`` as a non-exclusive async worker.

        Errors inside the worker never crash the app (exit_on_error=False),
        so every worker catches its own failures and posts them as messages.
        """
        return self.run_worker(  # type: ignore[attr-defined]
            work,
            name=name,
            group=group,
            exclusive=False,
            exit_on_error=False,
        )

    def cancel_workers(self) -> None:
        with suppress(NoActiveAppError):
            self.workers.cancel_node(self)  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        """Cancel all workers when the screen is unmounted."""
        self.cancel_workers()


__all__ = [
    "ConnectorActionDone",
    "ConsumerGroupsLoadFailed",
    "ConsumerGroupsLoaded",
    "DescribeReady",
    "ResourcesLoadFailed",
    "ResourcesLoaded",
    "WorkerMixin",
]
