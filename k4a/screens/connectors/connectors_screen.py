"""Connectors screen - connector list with pause, resume and restart."""

from __future__ import annotations

import logging

from k4a.constants.enums import ConnectorAction, ViewName
from k4a.controllers.kafkactl.client import KafkactlError
from k4a.keyboard import CONNECTORS_FOOTER_HINTS, CONNECTORS_SCREEN_BINDINGS
from k4a.screens.base_screen import ResourceScreen
from k4a.screens.connectors.presenter import ConnectorsPresenter
from k4a.screens.mixins.worker_mixin import ConnectorActionDone

logger = logging.getLogger(__name__)


class ConnectorsScreen(ResourceScreen):
    """Connectors view.

    An action's outcome is only reported in the footer. Whatever the
    outcome, a non-forced refresh follows.
    """

    BINDINGS = CONNECTORS_SCREEN_BINDINGS

    view_name = ViewName.CONNECTORS
    presenter_class = ConnectorsPresenter
    footer_hints = CONNECTORS_FOOTER_HINTS

    presenter: ConnectorsPresenter

    def action_connector_action(self, action: str) -> None:
        if self._input_blocked():
            return
        name = self.selected_name()
        if name is None:
            self.set_footer_message("No connector selected")
            return
        connector_action = ConnectorAction(action)
        self.start_worker(
            self._run_connector_action(connector_action, name),
            name=f"connector-{connector_action.value}-{name}",
            group="connector-action",
        )

    async def _run_connector_action(self, action: ConnectorAction, name: str) -> None:
        try:
            output = await self.client.connector_action(action, name)
        except (KafkactlError, OSError) as e:
            self.post_message(ConnectorActionDone(action, name, error=str(e)))
            return
        except Exception as e:
            logger.exception(f"Unexpected error running {action.value} on {name}")
            self.post_message(ConnectorActionDone(action, name, error=str(e)))
            return
        self.post_message(ConnectorActionDone(action, name, output=output))

    def on_connector_action_done(self, message: ConnectorActionDone) -> None:
        message.stop()
        self.set_footer_message(
            self.presenter.action_message(message.action, message.name, message.error),
            error=message.error is not None,
        )
        self.request_refresh(force=False)
