"""Topics screen presenter - topic rows and the consumer groups overlay."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from k4a.constants.enums import OverlayMode, ResourceKind
from k4a.constants.values import STATUS_NONE
from k4a.models.resource import ResourceRecord
from k4a.models.state.view_state import SequenceGuard
from k4a.screens.base_presenter import ResourcePresenter, Row
from k4a.screens.consumers.presenter import consumer_group_cells
from k4a.screens.topics.config import RETENTION_CONFIG_KEY, TOPICS_TABLE_COLUMNS
from k4a.utils.formatting import format_retention
from k4a.utils.resource_parser import extract_string

logger = logging.getLogger(__name__)


class TopicsPresenter(ResourcePresenter):
    """Presenter for the topics view.

    Besides the detail overlay, topics have a consumer groups overlay with
    its own fetch sequence, independent of the topic list refreshes.
    """

    kind = ResourceKind.TOPICS
    label = "Topic"
    plural = "topics"
    columns = TOPICS_TABLE_COLUMNS
    allowed_overlays = frozenset({OverlayMode.NONE, OverlayMode.DETAIL, OverlayMode.CONSUMER_GROUPS})

    def __init__(self) -> None:
        super().__init__()
        self.consumer_groups_guard = SequenceGuard()
        self.consumer_groups_topic = ""
        self.consumer_groups: list[ResourceRecord] = []
        self.consumer_groups_error: str | None = None
        self.consumer_groups_loading = False

    def format_row(self, record: ResourceRecord) -> tuple[str, ...]:
        spec = record.spec
        configs = spec.get("configs")
        retention = STATUS_NONE
        if isinstance(configs, Mapping) and RETENTION_CONFIG_KEY in configs:
            retention = format_retention(configs[RETENTION_CONFIG_KEY])
        return (
            record.name,
            extract_string(spec, "partitions", STATUS_NONE),
            extract_string(spec, "replicationFactor", STATUS_NONE),
            retention,
            extract_string(spec, "description", STATUS_NONE),
        )

    # =========================================================================
    # Consumer groups overlay
    # =========================================================================

    def open_consumer_groups(self, topic: str) -> int:
        """Show the consumer groups overlay for ``topic`` and issue its fetch sequence."""
        self.state.set_overlay(OverlayMode.CONSUMER_GROUPS)
        self.consumer_groups_topic = topic
        self.consumer_groups = []
        self.consumer_groups_error = None
        self.consumer_groups_loading = True
        return self.consumer_groups_guard.issue()

    def apply_consumer_groups(self, seq: int, records: list[ResourceRecord]) -> bool:
        if not self.consumer_groups_guard.accept(seq):
            return False
        self.consumer_groups = list(records)
        self.consumer_groups_error = None
        self.consumer_groups_loading = self.consumer_groups_guard.pending
        return True

    def apply_consumer_groups_error(self, seq: int, error: str) -> bool:
        if not self.consumer_groups_guard.accept(seq):
            return False
        logger.warning(f"Loading consumer groups of {self.consumer_groups_topic} failed: {error}")
        self.consumer_groups_error = error
        self.consumer_groups_loading = self.consumer_groups_guard.pending
        return True

    def consumer_group_rows(self) -> list[Row]:
        return [(record.name, consumer_group_cells(record)) for record in self.consumer_groups]

    def consumer_groups_title(self) -> str:
        topic = self.consumer_groups_topic
        if self.consumer_groups_loading:
            return f"Consumer groups of {topic}: loading..."
        if self.consumer_groups_error is not None:
            return f"Consumer groups of {topic}: Error: {self.consumer_groups_error}"
        if not self.consumer_groups:
            return f"Consumer groups of {topic}: none"
        return f"Consumer groups of {topic} ({len(self.consumer_groups)})"

    def close_overlay(self) -> None:
        if self.state.overlay is OverlayMode.CONSUMER_GROUPS:
            guard = self.consumer_groups_guard
            guard.applied_seq = guard.issued_seq
            self.consumer_groups_loading = False
        super().close_overlay()
