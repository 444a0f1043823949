"""Smoke tests driving K4aApp headlessly with a mocked kafkactl client."""

from __future__ import annotations

import threading
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from textual.widgets import Static

from k4a.app import K4aApp
from k4a.constants import DETAIL_CHROME_HEIGHT
from k4a.constants.enums import ConnectorAction, OverlayMode, ViewName
from k4a.controllers.kafkactl.client import KafkactlClient, KafkactlCommandError
from k4a.models.resource import ResourceRecord
from k4a.models.state.config_manager import KafkactlConfig
from k4a.models.state.context_manager import ContextManager
from k4a.screens import HelpScreen
from k4a.widgets import CustomFooter, DetailPanel, ResourceTable


def _record(name: str, **sections: object) -> ResourceRecord:
    record = ResourceRecord.from_document({"metadata": {"name": name}, **sections})
    assert record is not None
    return record


RECORDS: dict[str, list[ResourceRecord]] = {
    "topics": [
        _record("orders", spec={"partitions": 6}),
        _record("payments", spec={"partitions": 3}),
        _record("kafka-logs", spec={"partitions": 1}),
    ],
    "schemas": [_record("orders-value", spec={"version": 2})],
    "connectors": [
        _record(
            "sink-a",
            spec={"config": {"connector.class": "io.example.SinkConnector"}},
            status={"state": "RUNNING"},
        )
    ],
    "consumer-groups": [_record("billing", status={"state": "Stable"})],
    "acls": [],
}


def _make_client() -> MagicMock:
    client = MagicMock(spec=KafkactlClient)
    client.refresh_interval = 600.0

    async def fetch(kind: str, args: tuple[str, ...] = (), force_refresh: bool = False) -> list[ResourceRecord]:
        return list(RECORDS[kind])

    client.fetch = AsyncMock(side_effect=fetch)
    client.fetch_consumer_groups = AsyncMock(return_value=[_record("billing", status={"state": "Stable"})])
    client.connector_action = AsyncMock(return_value="")
    return client


def _make_contexts(tmp_path: Path) -> ContextManager:
    config = KafkactlConfig.model_validate(
        {
            "current-context": "dev",
            "contexts": [
                {"name": "dev", "context": {"api": "https://dev.example.com", "namespace": "team-a"}},
                {"name": "prod", "context": {"api": "https://prod.example.com", "namespace": "team-b"}},
            ],
        }
    )
    return ContextManager(config, tmp_path / "config.yml")


@pytest.fixture
def client() -> MagicMock:
    return _make_client()


@pytest.fixture
def app(client: MagicMock, tmp_path: Path) -> K4aApp:
    return K4aApp(client, _make_contexts(tmp_path))


async def _settle(pilot) -> None:
    await pilot.pause()
    await pilot.app.workers.wait_for_complete()
    await pilot.pause()


def _table(app: K4aApp, view: ViewName) -> ResourceTable:
    return app.view_screen(view).query_one("#resource-table", ResourceTable)


def _footer(app: K4aApp, view: ViewName) -> CustomFooter:
    return app.view_screen(view).query_one("#footer", CustomFooter)


# =============================================================================
# Startup and view switching
# =============================================================================


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_starts_on_topics_with_rows(app: K4aApp, client: MagicMock) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        assert app.active_view is ViewName.TOPICS
        assert app.view_screen(ViewName.TOPICS).is_active
        assert _table(app, ViewName.TOPICS).row_keys == ["orders", "payments", "kafka-logs"]
        client.set_scope.assert_called_with("dev/team-a")
        client.fetch.assert_any_await("topics", (), force_refresh=False)


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_command_prompt_switches_view(app: K4aApp, client: MagicMock) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("colon", *"schemas", "enter")
        await _settle(pilot)

        assert app.active_view is ViewName.SCHEMAS
        assert app.screen is app.view_screen(ViewName.SCHEMAS)
        assert not app.view_screen(ViewName.TOPICS).is_active
        assert app.view_screen(ViewName.SCHEMAS).is_active
        assert _table(app, ViewName.SCHEMAS).row_keys == ["orders-value"]


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_unknown_command_reports_in_footer(app: K4aApp) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("colon", *"bogus", "enter")
        await pilot.pause()
        assert _footer(app, ViewName.TOPICS).message == "Unknown command: bogus"
        assert app.active_view is ViewName.TOPICS


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_escape_cancels_prompt(app: K4aApp) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("colon", "escape")
        await pilot.pause()
        assert not app.view_screen(ViewName.TOPICS).command_bar_open


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_help_toggles(app: K4aApp) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("question_mark")
        await pilot.pause()
        assert isinstance(app.screen, HelpScreen)

        await pilot.press("question_mark")
        await pilot.pause()
        assert app.screen is app.view_screen(ViewName.TOPICS)


# =============================================================================
# Filtering and overlays
# =============================================================================


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_filter_narrows_rows(app: K4aApp) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("slash", *"pay", "enter")
        await pilot.pause()
        assert _table(app, ViewName.TOPICS).row_keys == ["payments"]

        await pilot.press("slash", "enter")
        await pilot.pause()
        assert len(_table(app, ViewName.TOPICS).row_keys) == 3


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_describe_opens_detail_and_escape_closes(app: K4aApp) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("d")
        await _settle(pilot)

        screen = app.view_screen(ViewName.TOPICS)
        assert screen.presenter.overlay is OverlayMode.DETAIL
        panel = screen.query_one("#detail-panel", DetailPanel)
        assert panel.title == "Topic: orders"
        assert "name: orders" in panel.content

        await pilot.press("escape")
        await pilot.pause()
        assert screen.presenter.overlay is OverlayMode.NONE


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_enter_lists_consumer_groups(app: K4aApp, client: MagicMock) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("j", "enter")
        await _settle(pilot)

        screen = app.view_screen(ViewName.TOPICS)
        assert screen.presenter.overlay is OverlayMode.CONSUMER_GROUPS
        client.fetch_consumer_groups.assert_awaited_once_with("payments")
        overlay = screen.query_one("#consumer-groups-table", ResourceTable)
        assert overlay.row_keys == ["billing"]

        await pilot.press("escape")
        await pilot.pause()
        assert screen.presenter.overlay is OverlayMode.NONE


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_refresh_error_keeps_rows(app: K4aApp, client: MagicMock) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        client.fetch.side_effect = KafkactlCommandError(["get", "topics"], "timeout", 1)
        await pilot.press("ctrl+r")
        await _settle(pilot)

        assert _table(app, ViewName.TOPICS).row_keys == ["orders", "payments", "kafka-logs"]
        assert _footer(app, ViewName.TOPICS).message.startswith("Refresh failed:")


# =============================================================================
# Connectors and contexts
# =============================================================================


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_connector_pause(app: K4aApp, client: MagicMock) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("colon", *"connectors", "enter")
        await _settle(pilot)
        assert _table(app, ViewName.CONNECTORS).row_keys == ["sink-a"]

        await pilot.press("p")
        await _settle(pilot)
        client.connector_action.assert_awaited_once_with(ConnectorAction.PAUSE, "sink-a")
        assert _footer(app, ViewName.CONNECTORS).message == "Connector sink-a: pause requested"


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_context_switch_rescopes_cache(app: K4aApp, client: MagicMock) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("colon", *"ctx", "space", *"prod", "enter")
        await _settle(pilot)

        assert app.contexts.current_context_name == "prod"
        client.set_scope.assert_called_with("prod/team-b")
        assert _table(app, ViewName.TOPICS).row_keys == ["orders", "payments", "kafka-logs"]
        assert _footer(app, ViewName.TOPICS).message == "Switched to context prod"


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_cache_clear_command(app: K4aApp, client: MagicMock) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("colon", *"cache", "space", *"clear", "enter")
        await _settle(pilot)

        client.invalidate_cache.assert_called_once()
        client.fetch.assert_any_await("topics", (), force_refresh=True)


# =============================================================================
# Unexpected failures
# =============================================================================


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_unexpected_fetch_error_replaces_loading_text(app: K4aApp, client: MagicMock) -> None:
    client.fetch.side_effect = RuntimeError("decode failed")
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)

        screen = app.view_screen(ViewName.TOPICS)
        assert not screen.presenter.state.loading
        assert screen.presenter.status_text() == "Error: decode failed"
        status = screen.query_one("#view-status", Static)
        assert status.display
        assert status.has_class("error")
        assert not _table(app, ViewName.TOPICS).display


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_unexpected_consumer_groups_error_settles_overlay(app: K4aApp, client: MagicMock) -> None:
    client.fetch_consumer_groups.side_effect = RuntimeError("bad payload")
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("enter")
        await _settle(pilot)

        presenter = app.view_screen(ViewName.TOPICS).presenter
        assert presenter.overlay is OverlayMode.CONSUMER_GROUPS
        assert not presenter.consumer_groups_loading
        assert presenter.consumer_groups_error == "bad payload"


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_unexpected_connector_action_error_still_refreshes(app: K4aApp, client: MagicMock) -> None:
    client.connector_action.side_effect = RuntimeError("boom")
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.press("colon", *"connectors", "enter")
        await _settle(pilot)
        fetches_before = client.fetch.await_count

        await pilot.press("t")
        await _settle(pilot)
        assert _footer(app, ViewName.CONNECTORS).message == "Failed to restart connector sink-a: boom"
        assert client.fetch.await_count == fetches_before + 1
        client.fetch.assert_awaited_with("connectors", (), force_refresh=False)


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_describe_runs_on_event_loop_thread(app: K4aApp) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        presenter = app.view_screen(ViewName.TOPICS).presenter
        describe = presenter.describe
        threads: list[int] = []

        def tracking_describe(name: str) -> tuple[str, str]:
            threads.append(threading.get_ident())
            return describe(name)

        presenter.describe = tracking_describe  # type: ignore[method-assign]
        await pilot.press("d")
        await _settle(pilot)

        assert threads == [threading.get_ident()]
        assert presenter.overlay is OverlayMode.DETAIL


# =============================================================================
# Resizing
# =============================================================================


def _expected_table_height(app: K4aApp, view: ViewName, terminal_height: int) -> int:
    presenter = app.view_screen(view).presenter
    return presenter.table_height(presenter.content_height(terminal_height)) + 1


def _detail_size(app: K4aApp, view: ViewName) -> tuple[int, int]:
    return app.view_screen(view).query_one("#detail-panel", DetailPanel).content_size


@pytest.mark.smoke
@pytest.mark.asyncio
async def test_resize_reaches_inactive_views(app: K4aApp) -> None:
    async with app.run_test(size=(120, 40)) as pilot:
        await _settle(pilot)
        await pilot.resize_terminal(100, 30)
        await _settle(pilot)

        topics_height = _table(app, ViewName.TOPICS).styles.height
        assert topics_height is not None
        assert topics_height.value == _expected_table_height(app, ViewName.TOPICS, 30)
        content_height = app.view_screen(ViewName.TOPICS).presenter.content_height(30)
        assert _detail_size(app, ViewName.TOPICS) == (98, content_height - DETAIL_CHROME_HEIGHT)

        await pilot.press("colon", *"schemas", "enter")
        await _settle(pilot)

        schemas_height = _table(app, ViewName.SCHEMAS).styles.height
        assert schemas_height is not None
        assert schemas_height.value == _expected_table_height(app, ViewName.SCHEMAS, 30)
        assert _detail_size(app, ViewName.SCHEMAS) == (98, content_height - DETAIL_CHROME_HEIGHT)

        # Topics is now inactive but still mounted
        await pilot.resize_terminal(90, 24)
        await _settle(pilot)
        topics_height = _table(app, ViewName.TOPICS).styles.height
        assert topics_height is not None
        assert topics_height.value == _expected_table_height(app, ViewName.TOPICS, 24)
        small_content = app.view_screen(ViewName.TOPICS).presenter.content_height(24)
        assert _detail_size(app, ViewName.TOPICS) == (88, small_content - DETAIL_CHROME_HEIGHT)
