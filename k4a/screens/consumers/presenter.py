"""Consumers screen presenter - consumer group rows."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from k4a.constants.enums import ResourceKind
from k4a.constants.values import STATUS_NONE
from k4a.models.resource import ResourceRecord
from k4a.screens.base_presenter import ResourcePresenter
from k4a.screens.consumers.config import (
    CONSUMER_GROUPS_TABLE_COLUMNS,
    GROUP_LAG_PATHS,
    GROUP_MEMBERS_PATHS,
    GROUP_STATE_PATHS,
)
from k4a.utils.resource_parser import extract_value


def _first_value(document: dict[str, Any], paths: Sequence[str]) -> Any:
    for path in paths:
        try:
            return extract_value(document, path)
        except KeyError:
            continue
    return None


def consumer_group_cells(record: ResourceRecord) -> tuple[str, str, str, str]:
    """Group ID, state, members and lag of a consumer group; ``-`` when absent."""
    state = _first_value(record.document, GROUP_STATE_PATHS)
    members = _first_value(record.document, GROUP_MEMBERS_PATHS)
    lag = _first_value(record.document, GROUP_LAG_PATHS)
    if isinstance(members, list):
        members = len(members)
    return (
        record.name,
        STATUS_NONE if state is None else str(state),
        STATUS_NONE if members is None else str(members),
        STATUS_NONE if lag is None else str(lag),
    )


class ConsumersPresenter(ResourcePresenter):
    """Presenter for the consumer groups view."""

    kind = ResourceKind.CONSUMER_GROUPS
    label = "Consumer group"
    plural = "consumer groups"
    columns = CONSUMER_GROUPS_TABLE_COLUMNS

    def format_row(self, record: ResourceRecord) -> tuple[str, ...]:
        return consumer_group_cells(record)
