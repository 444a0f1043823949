"""Connectors screen presenter - rows with status dots and action messages."""

from __future__ import annotations

from collections.abc import Mapping

from rich.text import Text

from k4a.constants.enums import ConnectorAction, ResourceKind
from k4a.constants.values import STATUS_NONE
from k4a.models.resource import ResourceRecord
from k4a.screens.base_presenter import ResourcePresenter
from k4a.screens.connectors.config import (
    CONNECTOR_CLASS_KEY,
    CONNECTOR_STATE_PATHS,
    CONNECTORS_TABLE_COLUMNS,
    TASKS_DEFAULT,
    TASKS_MAX_KEY,
)
from k4a.utils.resource_parser import extract_string
from k4a.widgets.display.status_dot import status_dot


def connector_state(record: ResourceRecord) -> str:
    for path in CONNECTOR_STATE_PATHS:
        state = extract_string(record.document, path)
        if state:
            return state.upper()
    return STATUS_NONE


class ConnectorsPresenter(ResourcePresenter):
    """Presenter for the connectors view."""

    kind = ResourceKind.CONNECTORS
    label = "Connector"
    plural = "connectors"
    columns = CONNECTORS_TABLE_COLUMNS

    def format_row(self, record: ResourceRecord) -> tuple[str | Text, ...]:
        spec = record.spec
        config = spec.get("config")
        if not isinstance(config, Mapping):
            config = {}
        connector_class = str(config.get(CONNECTOR_CLASS_KEY) or STATUS_NONE)
        connector_type = "sink" if "sink" in connector_class.lower() else "source"
        tasks = config.get(TASKS_MAX_KEY)
        state = connector_state(record)
        return (
            Text.assemble(Text.from_markup(status_dot(state)), " ", record.name),
            connector_class,
            connector_type,
            state,
            TASKS_DEFAULT if tasks is None else str(tasks),
            extract_string(spec, "connectCluster", STATUS_NONE),
        )

    @staticmethod
    def action_message(action: ConnectorAction, name: str, error: str | None = None) -> str:
        """Footer text reporting the outcome of a connector action."""
        if error is not None:
            return f"Failed to {action.value} connector {name}: {error}"
        return f"Connector {name}: {action.value} requested"
