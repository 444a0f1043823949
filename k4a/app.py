"""Main application class for the k4a TUI."""

from __future__ import annotations

import logging
from contextlib import suppress
from typing import cast

from textual.app import App
from textual.binding import Binding
from textual.css.query import NoMatches, WrongType
from textual.events import Resize

from k4a.constants import APP_TITLE
from k4a.constants.enums import CommandKind, PromptMode, ViewName
from k4a.controllers.kafkactl.client import KafkactlClient
from k4a.keyboard.app import APP_BINDINGS
from k4a.models.state.config_manager import ConfigError
from k4a.models.state.context_manager import ContextManager
from k4a.screens import VIEW_SCREENS, HelpScreen, ResourceScreen, parse_command
from k4a.widgets import CommandBar

logger = logging.getLogger(__name__)


def cache_scope(context: str, namespace: str) -> str:
    """Cache key scope for a context and namespace."""
    return f"{context}/{namespace}" if namespace else context


class K4aApp(App[None]):
    """Main TUI application for k4a.

    Owns one installed screen per view. Exactly one view is active at a
    time: it is the current screen (or under the help modal) and its
    refresh timer is the only one running.
    """

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    def __init__(
        self,
        client: KafkactlClient,
        contexts: ContextManager,
        initial_view: ViewName = ViewName.TOPICS,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.client = client
        self.contexts = contexts
        self._initial_view = initial_view
        self._active_view: ViewName | None = None
        self.client.set_scope(cache_scope(contexts.current_context_name, contexts.get_current_namespace()))

    @property
    def active_view(self) -> ViewName | None:
        return self._active_view

    @staticmethod
    def screen_name(view: ViewName) -> str:
        return f"view-{view.value}"

    def view_screen(self, view: ViewName) -> ResourceScreen:
        return cast(ResourceScreen, self.get_screen(self.screen_name(view)))

    def view_screens(self) -> list[ResourceScreen]:
        return [self.view_screen(view) for view in VIEW_SCREENS]

    @property
    def active_screen(self) -> ResourceScreen | None:
        if self._active_view is None:
            return None
        return self.view_screen(self._active_view)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def on_mount(self) -> None:
        for view, screen_class in VIEW_SCREENS.items():
            self.install_screen(screen_class(self.client), self.screen_name(view))
        self._broadcast_header()
        self._broadcast_size(self.size.width, self.size.height)
        await self.switch_view(self._initial_view)

    def on_resize(self, event: Resize) -> None:
        self._broadcast_size(event.size.width, event.size.height)

    def _broadcast_size(self, width: int, height: int) -> None:
        for screen in self.view_screens():
            screen.apply_size(width, height)

    def _broadcast_header(self) -> None:
        context = self.contexts.current_context_name
        namespace = self.contexts.get_current_namespace()
        api = self.contexts.get_current_api()
        for screen in self.view_screens():
            screen.set_header_info(context=context, namespace=namespace, api=api)

    # =========================================================================
    # View switching
    # =========================================================================

    async def switch_view(self, view: ViewName) -> None:
        """Make ``view`` the active view.

        The previous view's timer stops before the new view's starts.
        """
        if view is self._active_view:
            return
        if isinstance(self.screen, HelpScreen):
            self.pop_screen()
        previous = self.active_screen
        if previous is not None:
            previous.deactivate()
        name = self.screen_name(view)
        if previous is None:
            await self.push_screen(name)
        else:
            await self.switch_screen(name)
        self._active_view = view
        logger.info(f"Switched to {view.value} view")
        self.view_screen(view).activate()

    # =========================================================================
    # Commands
    # =========================================================================

    async def on_command_bar_prompt_submitted(self, message: CommandBar.PromptSubmitted) -> None:
        if message.mode is PromptMode.COMMAND:
            await self.run_command(message.value)

    async def run_command(self, text: str) -> None:
        command = parse_command(text)
        screen = self.active_screen
        logger.debug(f"Command {command.kind.value}: {text!r}")

        if command.kind is CommandKind.EMPTY:
            return
        if command.kind is CommandKind.QUIT:
            self.exit()
        elif command.kind is CommandKind.VIEW and command.view is not None:
            await self.switch_view(command.view)
        elif command.kind is CommandKind.HELP:
            self.action_toggle_help()
        elif command.kind is CommandKind.CONTEXT:
            self._switch_context(command.argument)
        elif command.kind is CommandKind.NAMESPACE:
            self._set_namespace(command.argument)
        elif command.kind is CommandKind.CACHE_CLEAR:
            self.client.invalidate_cache()
            if screen is not None:
                screen.set_footer_message("Cache cleared")
                screen.request_refresh(force=True)
        elif screen is not None:
            screen.set_footer_message(f"Unknown command: {command.text}", error=True)

    def _switch_context(self, name: str) -> None:
        screen = self.active_screen
        if not name:
            names = ", ".join(self.contexts.list_contexts())
            if screen is not None:
                screen.set_footer_message(f"Contexts: {names} (current: {self.contexts.current_context_name})")
            return
        try:
            self.contexts.switch_context(name)
        except ConfigError as e:
            logger.error(f"Context switch to {name} failed: {e}")
            self.notify(str(e), title="Context switch failed", severity="error")
            return
        self._rescope()
        if screen is not None:
            screen.set_footer_message(f"Switched to context {name}")

    def _set_namespace(self, namespace: str) -> None:
        screen = self.active_screen
        if not namespace:
            if screen is not None:
                screen.set_footer_message(f"Namespace: {self.contexts.get_current_namespace()}")
            return
        try:
            self.contexts.set_namespace(namespace)
        except ConfigError as e:
            logger.error(f"Namespace switch to {namespace} failed: {e}")
            self.notify(str(e), title="Namespace switch failed", severity="error")
            return
        self._rescope()
        if screen is not None:
            screen.set_footer_message(f"Namespace set to {namespace}")

    def _rescope(self) -> None:
        """Point the cache at the new context and reload the active view."""
        self.client.set_scope(cache_scope(self.contexts.current_context_name, self.contexts.get_current_namespace()))
        for screen in self.view_screens():
            screen.reset()
        self._broadcast_header()
        active = self.active_screen
        if active is not None:
            active.request_refresh(force=False)

    # =========================================================================
    # Help
    # =========================================================================

    def action_toggle_help(self) -> None:
        if isinstance(self.screen, HelpScreen):
            self.pop_screen()
            return
        with suppress(NoMatches, WrongType):
            if self.screen.query_one(CommandBar).is_open:
                return
        self.push_screen(HelpScreen())


__all__ = ["K4aApp", "cache_scope"]
