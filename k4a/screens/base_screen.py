"""Base screen class for k4a resource views.

A resource view is a Screen installed once on the app and kept for the
whole session. The app activates it when it becomes current (first fetch,
refresh timer armed) and deactivates it when another view takes over
(timer stopped). All data logic lives in the view's presenter; the screen
runs workers, applies their messages and renders.

Subclasses set:
- view_name: The ViewName the app switches to
- presenter_class: The ResourcePresenter subclass
- footer_hints: Keybinding hints shown while no overlay is open
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import suppress
from typing import TYPE_CHECKING, ClassVar, cast

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Static

from k4a.constants.enums import OverlayMode, PromptMode, ViewName
from k4a.controllers.kafkactl.client import KafkactlClient, KafkactlError
from k4a.keyboard import (
    OVERLAY_FOOTER_HINTS,
    PROMPT_FOOTER_HINTS,
    RESOURCE_FOOTER_HINTS,
    RESOURCE_SCREEN_BINDINGS,
)
from k4a.screens.base_presenter import ResourcePresenter, Row
from k4a.screens.mixins.worker_mixin import (
    DescribeReady,
    ResourcesLoaded,
    ResourcesLoadFailed,
    WorkerMixin,
)
from k4a.widgets import (
    CommandBar,
    CustomFooter,
    CustomHeader,
    DetailPanel,
    ResourceTable,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from k4a.app import K4aApp


def to_table_cells(rows: list[Row]) -> list[tuple[str, tuple[Text, ...]]]:
    """Convert presenter rows to DataTable cells.

    Plain strings become unstyled Text so resource names are never parsed
    as markup.
    """
    return [
        (key, tuple(cell if isinstance(cell, Text) else Text(cell) for cell in cells))
        for key, cells in rows
    ]


class ResourceScreen(WorkerMixin, Screen[None]):
    """Abstract base class for resource list views."""

    BINDINGS = RESOURCE_SCREEN_BINDINGS

    DEFAULT_CSS = """
    ResourceScreen {
        layout: vertical;
    }
    ResourceScreen #view-status {
        height: 1fr;
        padding: 1 2;
    }
    ResourceScreen #view-status.error {
        color: $error;
    }
    ResourceScreen DetailPanel {
        height: 1fr;
    }
    """

    view_name: ClassVar[ViewName]
    presenter_class: ClassVar[type[ResourcePresenter]]
    footer_hints: ClassVar[list[tuple[str, str]]] = RESOURCE_FOOTER_HINTS

    def __init__(self, client: KafkactlClient) -> None:
        super().__init__()
        self.client = client
        self.presenter = self.presenter_class()
        self._refresh_timer: Timer | None = None
        self._size: tuple[int, int] | None = None
        self._header_info: dict[str, str] = {}
        self._refresh_error_shown = False

    @property
    def app(self) -> K4aApp:
        return cast("K4aApp", super().app)

    # =========================================================================
    # Composition
    # =========================================================================

    def compose(self) -> ComposeResult:
        yield CustomHeader(view=self.view_name.value, id="header", **self._header_info)
        yield Static("", id="view-status")
        yield ResourceTable(self.presenter.columns, id="resource-table")
        yield from self.compose_overlays()
        yield DetailPanel(id="detail-panel")
        yield CommandBar(id="command-bar")
        yield CustomFooter(self.footer_hints, id="footer")

    def compose_overlays(self) -> Iterator[Widget]:
        """Extra overlay widgets of a view. None by default."""
        yield from ()

    def on_mount(self) -> None:
        if self._size is not None:
            self.apply_size(*self._size)
        self.render_view()
        self.focus_table()

    # =========================================================================
    # Activation
    # =========================================================================

    @property
    def is_active(self) -> bool:
        return self._refresh_timer is not None

    def activate(self) -> None:
        """Start auto-refresh and fetch. Called when the view becomes current."""
        if self._refresh_timer is None:
            self._refresh_timer = self.set_interval(self.client.refresh_interval, self._on_refresh_tick)
        logger.debug(f"Activated {self.view_name.value} view")
        self.request_refresh(force=False)

    def deactivate(self) -> None:
        """Stop auto-refresh. Called when another view becomes current."""
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
            self._refresh_timer = None
        logger.debug(f"Deactivated {self.view_name.value} view")

    def _on_refresh_tick(self) -> None:
        self.request_refresh(force=False)

    # =========================================================================
    # Fetching
    # =========================================================================

    def request_refresh(self, force: bool = False) -> int:
        """Issue a fetch with a new sequence number and return it."""
        seq = self.presenter.begin_fetch()
        self.start_worker(
            self._fetch_resources(seq, force),
            name=f"fetch-{self.presenter.kind.value}-{seq}",
            group="fetch",
        )
        self.render_view()
        return seq

    async def _fetch_resources(self, seq: int, force: bool) -> None:
        start = time.monotonic()
        try:
            records = await self.client.fetch(
                self.presenter.kind.value,
                self.presenter.fetch_args(),
                force_refresh=force,
            )
        except (KafkactlError, OSError) as e:
            self.post_message(ResourcesLoadFailed(seq, str(e)))
            return
        except Exception as e:
            logger.exception(f"Unexpected error fetching {self.presenter.plural}")
            self.post_message(ResourcesLoadFailed(seq, str(e)))
            return
        self.post_message(ResourcesLoaded(seq, records, (time.monotonic() - start) * 1000))

    def on_resources_loaded(self, message: ResourcesLoaded) -> None:
        message.stop()
        if self.presenter.apply_loaded(message.seq, message.records):
            logger.debug(
                f"Applied {len(message.records)} {self.presenter.plural} "
                f"#{message.seq} in {message.duration_ms:.0f}ms"
            )
            self.render_view()

    def on_resources_load_failed(self, message: ResourcesLoadFailed) -> None:
        message.stop()
        if self.presenter.apply_failed(message.seq, message.error):
            self.render_view()

    def reset(self) -> None:
        """Drop loaded data and pending results, e.g. after a context switch."""
        self.presenter.reset()
        with suppress(NoMatches, WrongType):
            self.query_one("#detail-panel", DetailPanel).hide()
        self.render_view()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_view(self) -> None:
        if not self.is_mounted:
            return
        presenter = self.presenter
        status_text = presenter.status_text()
        with suppress(NoMatches, WrongType):
            status = self.query_one("#view-status", Static)
            status.update(Text(status_text or ""))
            status.set_class(presenter.state.error is not None, "error")
            table = self.query_one("#resource-table", ResourceTable)
            table.set_rows(to_table_cells(presenter.build_rows()))
            in_list = presenter.overlay is OverlayMode.NONE
            status.display = in_list and status_text is not None
            table.display = in_list and status_text is None
        self._render_refresh_error()
        self.render_overlays()

    def render_overlays(self) -> None:
        with suppress(NoMatches, WrongType):
            detail = self.query_one("#detail-panel", DetailPanel)
            detail.display = self.presenter.overlay is OverlayMode.DETAIL

    def _render_refresh_error(self) -> None:
        error = self.presenter.footer_error()
        if error is not None:
            self.set_footer_message(error, error=True)
            self._refresh_error_shown = True
        elif self._refresh_error_shown:
            self.set_footer_message("")
            self._refresh_error_shown = False

    def set_footer_message(self, message: str, *, error: bool = False) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#footer", CustomFooter).set_message(message, error=error)

    def sync_footer_hints(self) -> None:
        if self.command_bar_open:
            hints = PROMPT_FOOTER_HINTS
        elif self.presenter.overlay is not OverlayMode.NONE:
            hints = OVERLAY_FOOTER_HINTS
        else:
            hints = self.footer_hints
        with suppress(NoMatches, WrongType):
            self.query_one("#footer", CustomFooter).set_hints(hints)

    def set_header_info(self, *, context: str, namespace: str, api: str) -> None:
        self._header_info = {"context": context, "namespace": namespace, "api": api}
        with suppress(NoMatches, WrongType):
            self.query_one("#header", CustomHeader).set_info(context=context, namespace=namespace, api=api)

    # =========================================================================
    # Size
    # =========================================================================

    def apply_size(self, width: int, height: int) -> None:
        """Fit table and overlays to a terminal of ``width`` x ``height``.

        Inactive views receive sizes too so they are correct when shown.
        """
        self._size = (width, height)
        if not self.is_mounted:
            return
        content_height = self.presenter.content_height(height)
        # Column header row plus visible rows
        table_height = self.presenter.table_height(content_height) + 1
        with suppress(NoMatches, WrongType):
            self.query_one("#resource-table", ResourceTable).set_visible_height(table_height)
            self.query_one("#detail-panel", DetailPanel).apply_size(width, content_height)
        self.apply_overlay_size(width, content_height)

    def apply_overlay_size(self, width: int, content_height: int) -> None:
        """Resize view specific overlays. Nothing by default."""

    # =========================================================================
    # Focus helpers
    # =========================================================================

    def focus_table(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one("#resource-table", ResourceTable).focus_table()

    def focus_overlay(self) -> None:
        """Move focus into the open overlay."""
        if self.presenter.overlay is OverlayMode.DETAIL:
            with suppress(NoMatches, WrongType):
                self.query_one("#detail-scroll", VerticalScroll).focus()

    def overlay_table(self) -> ResourceTable | None:
        """Table of a tabular overlay, if the view has one open."""
        return None

    @property
    def command_bar_open(self) -> bool:
        with suppress(NoMatches, WrongType):
            return self.query_one("#command-bar", CommandBar).is_open
        return False

    def _input_blocked(self) -> bool:
        """True while an overlay owns the input."""
        return self.presenter.overlay is not OverlayMode.NONE

    def selected_name(self) -> str | None:
        with suppress(NoMatches, WrongType):
            return self.query_one("#resource-table", ResourceTable).selected_key
        return None

    # =========================================================================
    # Overlays
    # =========================================================================

    def action_describe(self) -> None:
        if self._input_blocked():
            return
        name = self.selected_name()
        if name is None:
            self.set_footer_message(f"No {self.presenter.label.lower()} selected")
            return
        self.start_worker(self._describe(name), name=f"describe-{name}", group="describe")

    async def _describe(self, name: str) -> None:
        title, content = self.presenter.describe(name)
        self.post_message(DescribeReady(title, content))

    def on_describe_ready(self, message: DescribeReady) -> None:
        message.stop()
        if self.presenter.overlay is not OverlayMode.NONE:
            return
        self.presenter.open_detail(message.title, message.content)
        with suppress(NoMatches, WrongType):
            self.query_one("#detail-panel", DetailPanel).show(message.title, message.content)
        self.render_view()
        self.focus_overlay()
        self.sync_footer_hints()

    def close_overlay(self) -> None:
        self.presenter.close_overlay()
        with suppress(NoMatches, WrongType):
            self.query_one("#detail-panel", DetailPanel).hide()
        self.render_view()
        self.focus_table()
        self.sync_footer_hints()

    # =========================================================================
    # Prompt
    # =========================================================================

    def open_prompt(self, mode: PromptMode) -> None:
        if self._input_blocked():
            return
        with suppress(NoMatches, WrongType):
            self.query_one("#command-bar", CommandBar).open(mode)
        self.sync_footer_hints()

    def action_open_command(self) -> None:
        self.open_prompt(PromptMode.COMMAND)

    def action_open_filter(self) -> None:
        self.open_prompt(PromptMode.FILTER)

    def on_command_bar_prompt_submitted(self, message: CommandBar.PromptSubmitted) -> None:
        self.focus_table()
        self.sync_footer_hints()
        if message.mode is not PromptMode.FILTER:
            # Commands bubble up to the app
            return
        message.stop()
        self.presenter.set_filter(message.value)
        self.render_view()
        if self.presenter.filter_term:
            self.set_footer_message(f"Filter: {self.presenter.filter_term}")
        else:
            self.set_footer_message("")

    def on_command_bar_prompt_cancelled(self, message: CommandBar.PromptCancelled) -> None:
        message.stop()
        self.focus_table()
        self.sync_footer_hints()

    # =========================================================================
    # Key actions
    # =========================================================================

    def action_back(self) -> None:
        if self.command_bar_open:
            with suppress(NoMatches, WrongType):
                self.query_one("#command-bar", CommandBar).cancel()
            return
        if self.presenter.overlay is not OverlayMode.NONE:
            self.close_overlay()

    def action_back_or_quit(self) -> None:
        if self.presenter.overlay is not OverlayMode.NONE:
            self.close_overlay()
            return
        self.app.exit()

    def action_refresh(self) -> None:
        if not self._input_blocked():
            self.request_refresh(force=False)

    def action_force_refresh(self) -> None:
        if not self._input_blocked():
            self.request_refresh(force=True)

    def _move(self, direction: str) -> None:
        overlay = self.presenter.overlay
        if overlay is OverlayMode.DETAIL:
            with suppress(NoMatches, WrongType):
                detail = self.query_one("#detail-panel", DetailPanel)
                if direction == "down":
                    detail.scroll_line(1)
                elif direction == "up":
                    detail.scroll_line(-1)
                elif direction == "top":
                    detail.scroll_to_top()
                else:
                    detail.scroll_to_bottom()
            return
        table = self.overlay_table() if overlay is not OverlayMode.NONE else None
        if table is None:
            with suppress(NoMatches, WrongType):
                table = self.query_one("#resource-table", ResourceTable)
        if table is None:
            return
        if direction == "down":
            table.cursor_down()
        elif direction == "up":
            table.cursor_up()
        elif direction == "top":
            table.cursor_top()
        else:
            table.cursor_bottom()

    def action_cursor_down(self) -> None:
        self._move("down")

    def action_cursor_up(self) -> None:
        self._move("up")

    def action_cursor_top(self) -> None:
        self._move("top")

    def action_cursor_bottom(self) -> None:
        self._move("bottom")


__all__ = ["ResourceScreen", "to_table_cells"]
