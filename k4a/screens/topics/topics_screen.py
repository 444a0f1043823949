"""Topics screen - topic list with describe and consumer groups overlays."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import suppress

from rich.text import Text
from textual.containers import Vertical
from textual.css.query import NoMatches, WrongType
from textual.widget import Widget
from textual.widgets import DataTable, Static

from k4a.constants.enums import OverlayMode, ViewName
from k4a.controllers.kafkactl.client import KafkactlError
from k4a.keyboard import TOPICS_FOOTER_HINTS
from k4a.screens.base_screen import ResourceScreen, to_table_cells
from k4a.screens.mixins.worker_mixin import ConsumerGroupsLoaded, ConsumerGroupsLoadFailed
from k4a.screens.topics.config import (
    CONSUMER_GROUPS_OVERLAY_COLUMNS,
    CONSUMER_GROUPS_TABLE_ID,
    CONSUMER_GROUPS_TITLE_ID,
)
from k4a.screens.topics.presenter import TopicsPresenter
from k4a.widgets import ResourceTable

logger = logging.getLogger(__name__)


class TopicsScreen(ResourceScreen):
    """Topics view. ``enter`` on a topic lists the consumer groups reading it."""

    DEFAULT_CSS = """
    TopicsScreen #consumer-groups-overlay {
        height: 1fr;
        border: round $accent;
    }
    TopicsScreen #consumer-groups-title {
        height: 1;
        text-style: bold;
    }
    """

    view_name = ViewName.TOPICS
    presenter_class = TopicsPresenter
    footer_hints = TOPICS_FOOTER_HINTS

    presenter: TopicsPresenter

    def compose_overlays(self) -> Iterator[Widget]:
        overlay = Vertical(
            Static("", id=CONSUMER_GROUPS_TITLE_ID),
            ResourceTable(CONSUMER_GROUPS_OVERLAY_COLUMNS, id=CONSUMER_GROUPS_TABLE_ID),
            id="consumer-groups-overlay",
        )
        overlay.display = False
        yield overlay

    def render_overlays(self) -> None:
        super().render_overlays()
        presenter = self.presenter
        with suppress(NoMatches, WrongType):
            overlay = self.query_one("#consumer-groups-overlay", Vertical)
            overlay.display = presenter.overlay is OverlayMode.CONSUMER_GROUPS
            self.query_one(f"#{CONSUMER_GROUPS_TITLE_ID}", Static).update(
                Text(presenter.consumer_groups_title())
            )
            self.query_one(f"#{CONSUMER_GROUPS_TABLE_ID}", ResourceTable).set_rows(
                to_table_cells(presenter.consumer_group_rows())
            )

    def apply_overlay_size(self, width: int, content_height: int) -> None:
        # Title line plus column header row
        rows = self.presenter.table_height(content_height - 1) + 1
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{CONSUMER_GROUPS_TABLE_ID}", ResourceTable).set_visible_height(rows)

    def overlay_table(self) -> ResourceTable | None:
        if self.presenter.overlay is not OverlayMode.CONSUMER_GROUPS:
            return None
        with suppress(NoMatches, WrongType):
            return self.query_one(f"#{CONSUMER_GROUPS_TABLE_ID}", ResourceTable)
        return None

    def focus_overlay(self) -> None:
        table = self.overlay_table()
        if table is not None:
            table.focus_table()
            return
        super().focus_overlay()

    # =========================================================================
    # Consumer groups
    # =========================================================================

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        event.stop()
        if self.presenter.overlay is not OverlayMode.NONE:
            return
        with suppress(NoMatches, WrongType):
            main_table = self.query_one("#resource-table", ResourceTable)
            if event.data_table is not main_table.data_table:
                return
        self.show_consumer_groups()

    def show_consumer_groups(self) -> None:
        topic = self.selected_name()
        if topic is None:
            return
        seq = self.presenter.open_consumer_groups(topic)
        self.start_worker(
            self._fetch_consumer_groups(seq, topic),
            name=f"consumer-groups-{topic}-{seq}",
            group="consumer-groups",
        )
        self.render_view()
        self.focus_overlay()
        self.sync_footer_hints()

    async def _fetch_consumer_groups(self, seq: int, topic: str) -> None:
        try:
            records = await self.client.fetch_consumer_groups(topic)
        except (KafkactlError, OSError) as e:
            self.post_message(ConsumerGroupsLoadFailed(seq, topic, str(e)))
            return
        except Exception as e:
            logger.exception(f"Unexpected error fetching consumer groups of {topic}")
            self.post_message(ConsumerGroupsLoadFailed(seq, topic, str(e)))
            return
        self.post_message(ConsumerGroupsLoaded(seq, topic, records))

    def on_consumer_groups_loaded(self, message: ConsumerGroupsLoaded) -> None:
        message.stop()
        if self.presenter.apply_consumer_groups(message.seq, message.records):
            self.render_overlays()

    def on_consumer_groups_load_failed(self, message: ConsumerGroupsLoadFailed) -> None:
        message.stop()
        if self.presenter.apply_consumer_groups_error(message.seq, message.error):
            self.render_overlays()
