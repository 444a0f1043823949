"""Per-view state: records, load phase, overlay and fetch sequencing."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from k4a.constants.enums import OverlayMode, ViewPhase
from k4a.models.resource import ResourceRecord

DEFAULT_OVERLAYS: frozenset[OverlayMode] = frozenset({OverlayMode.NONE, OverlayMode.DETAIL})


@dataclass
class SequenceGuard:
    """Monotonic fetch sequencing.

    Every issued fetch takes the next number. A result is applied only if
    its number is greater than the last applied one, so the most recently
    issued fetch wins regardless of completion order.
    """

    issued_seq: int = 0
    applied_seq: int = 0

    def issue(self) -> int:
        self.issued_seq += 1
        return self.issued_seq

    def accept(self, seq: int) -> bool:
        """Mark ``seq`` applied and return True, or return False if it is stale."""
        if seq <= self.applied_seq:
            return False
        self.applied_seq = seq
        return True

    @property
    def pending(self) -> bool:
        return self.issued_seq > self.applied_seq


@dataclass
class ViewState:
    """State of one resource view.

    ``records`` always holds the last successfully loaded list. An error
    leaves it untouched.
    """

    allowed_overlays: frozenset[OverlayMode] = DEFAULT_OVERLAYS
    records: list[ResourceRecord] = field(default_factory=list)
    loading: bool = False
    error: str | None = None
    last_refresh: float | None = None
    overlay: OverlayMode = OverlayMode.NONE
    guard: SequenceGuard = field(default_factory=SequenceGuard)

    @property
    def phase(self) -> ViewPhase:
        if self.error is not None:
            return ViewPhase.ERROR
        if self.last_refresh is None:
            return ViewPhase.LOADING
        return ViewPhase.READY

    def begin_fetch(self) -> int:
        """Issue a sequence number for a new fetch and mark the view loading."""
        self.loading = True
        return self.guard.issue()

    def apply_records(self, seq: int, records: list[ResourceRecord]) -> bool:
        """Apply a successful fetch result. Returns False if discarded as stale."""
        if not self.guard.accept(seq):
            return False
        self.records = list(records)
        self.error = None
        self.last_refresh = time.time()
        self.loading = self.guard.pending
        return True

    def apply_error(self, seq: int, error: str) -> bool:
        """Apply a failed fetch result. Returns False if discarded as stale."""
        if not self.guard.accept(seq):
            return False
        self.error = error
        self.loading = self.guard.pending
        return True

    def set_overlay(self, overlay: OverlayMode) -> None:
        """Switch the overlay.

        Raises:
            ValueError: If ``overlay`` is not valid for this view.
        """
        if overlay not in self.allowed_overlays:
            raise ValueError(f"overlay {overlay.value} is not available in this view")
        self.overlay = overlay

    def find_record(self, name: str) -> ResourceRecord | None:
        for record in self.records:
            if record.name == name:
                return record
        return None


__all__ = [
    "DEFAULT_OVERLAYS",
    "SequenceGuard",
    "ViewState",
]
