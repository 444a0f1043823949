"""Base presenter for resource views - view state, rows, describe and layout."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

import yaml
from rich.text import Text

from k4a.constants.enums import OverlayMode, ResourceKind
from k4a.constants.limits import (
    FOOTER_HEIGHT,
    HEADER_HEIGHT,
    MIN_CONTENT_HEIGHT,
    TABLE_CHROME_HEIGHT,
)
from k4a.models.resource import ResourceRecord
from k4a.models.state.view_state import DEFAULT_OVERLAYS, ViewState
from k4a.utils.resource_parser import filter_resources

logger = logging.getLogger(__name__)

# Cells are plain strings or pre-styled Rich Text
Cell = str | Text
Row = tuple[str, tuple[Cell, ...]]


class ResourcePresenter(ABC):
    """Pure state machine behind a resource view.

    Owns the ViewState, the name filter and the detail overlay content.
    Screens feed it fetch results and render what it derives; nothing here
    touches Textual.
    """

    kind: ClassVar[ResourceKind]
    label: ClassVar[str]
    plural: ClassVar[str]
    columns: ClassVar[list[tuple[str, int]]]
    allowed_overlays: ClassVar[frozenset[OverlayMode]] = DEFAULT_OVERLAYS

    def __init__(self) -> None:
        self.state = ViewState(allowed_overlays=self.allowed_overlays)
        self.filter_term = ""
        self.detail_title = ""
        self.detail_content = ""

    def fetch_args(self) -> tuple[str, ...]:
        return ()

    # =========================================================================
    # Fetch lifecycle
    # =========================================================================

    def begin_fetch(self) -> int:
        return self.state.begin_fetch()

    def apply_loaded(self, seq: int, records: list[ResourceRecord]) -> bool:
        applied = self.state.apply_records(seq, records)
        if not applied:
            logger.debug(f"Discarded stale {self.kind.value} result #{seq}")
        return applied

    def apply_failed(self, seq: int, error: str) -> bool:
        applied = self.state.apply_error(seq, error)
        if applied:
            logger.warning(f"Loading {self.kind.value} failed: {error}")
        else:
            logger.debug(f"Discarded stale {self.kind.value} error #{seq}")
        return applied

    def reset(self) -> None:
        """Forget loaded data, e.g. after a context switch.

        Fetches still in flight are marked applied so their results are dropped.
        """
        guard = self.state.guard
        guard.applied_seq = guard.issued_seq
        self.state.records = []
        self.state.error = None
        self.state.loading = False
        self.state.last_refresh = None
        self.state.overlay = OverlayMode.NONE

    # =========================================================================
    # Rows
    # =========================================================================

    def set_filter(self, term: str) -> None:
        self.filter_term = term.strip()

    def visible_records(self) -> list[ResourceRecord]:
        return filter_resources(self.state.records, self.filter_term)

    @abstractmethod
    def format_row(self, record: ResourceRecord) -> tuple[Cell, ...]:
        """Return the table cells for ``record``."""
        ...

    def build_rows(self) -> list[Row]:
        return [(record.name, self.format_row(record)) for record in self.visible_records()]

    def status_text(self) -> str | None:
        """Text shown in place of the table, or None when the table has rows to show."""
        if self.state.records:
            if self.filter_term and not self.visible_records():
                return f"No {self.plural} match '{self.filter_term}'"
            return None
        if self.state.error is not None:
            return f"Error: {self.state.error}"
        if self.state.loading or self.state.last_refresh is None:
            return f"Loading {self.plural}..."
        return f"No {self.plural} found"

    def footer_error(self) -> str | None:
        """Error for the footer when the table stays visible despite a failed refresh."""
        if self.state.error is not None and self.state.records:
            return f"Refresh failed: {self.state.error}"
        return None

    # =========================================================================
    # Overlays
    # =========================================================================

    @property
    def overlay(self) -> OverlayMode:
        return self.state.overlay

    def describe(self, name: str) -> tuple[str, str]:
        """Return (title, content) for the detail overlay of ``name``.

        Content is the in-memory record re-serialized to YAML. kafkactl is
        not consulted, so a name that is no longer loaded yields a message.
        """
        title = f"{self.label}: {name}"
        record = self.state.find_record(name)
        if record is None:
            return title, f"{self.label} '{name}' not found in cache"
        try:
            return title, record.to_yaml()
        except yaml.YAMLError as e:
            logger.error(f"Failed to serialize {self.label} {name}: {e}")
            return title, f"Error serializing {self.label.lower()}: {e}"

    def open_detail(self, title: str, content: str) -> None:
        self.state.set_overlay(OverlayMode.DETAIL)
        self.detail_title = title
        self.detail_content = content

    def close_overlay(self) -> None:
        self.state.set_overlay(OverlayMode.NONE)

    # =========================================================================
    # Layout
    # =========================================================================

    @staticmethod
    def content_height(total_height: int) -> int:
        """Rows left for the view between header and footer."""
        return max(MIN_CONTENT_HEIGHT, total_height - HEADER_HEIGHT - FOOTER_HEIGHT)

    @staticmethod
    def table_height(content_height: int) -> int:
        """Visible table rows for a content area of ``content_height``."""
        return max(MIN_CONTENT_HEIGHT, content_height - TABLE_CHROME_HEIGHT)


__all__ = ["Cell", "ResourcePresenter", "Row"]
