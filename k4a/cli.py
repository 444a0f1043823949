"""Command-line entry point using Typer."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markup import escape

from k4a import __version__
from k4a.app import K4aApp
from k4a.controllers.kafkactl.client import KafkactlClient
from k4a.models.cache.disk_cache import CacheError, DiskCache
from k4a.models.state.config_manager import ConfigError, ConfigManager
from k4a.models.state.context_manager import ContextManager
from k4a.utils.debug_log import DebugLog

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="k4a",
    help="Terminal dashboard for Kafka resources managed with kafkactl.",
    add_completion=False,
)

err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"k4a version {__version__}")
        raise typer.Exit()


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(code=1)


@app.command()
def run(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Write a debug log to ~/.local/k4a/debug.log.",
    ),
) -> None:
    """Browse topics, schemas, connectors, consumer groups and ACLs."""
    debug_log = DebugLog(enabled=debug)
    try:
        debug_log.open()
    except OSError as e:
        raise _fail(f"failed to open debug log: {e}") from e

    try:
        try:
            config = ConfigManager.load()
            current = config.get_current_context()
        except ConfigError as e:
            logger.error(f"Failed to load config: {e}")
            raise _fail(f"loading config: {e}") from e
        logger.debug(f"Config loaded, current context: {current.name}")

        try:
            cache = DiskCache()
        except CacheError as e:
            logger.error(f"Failed to initialize cache: {e}")
            raise _fail(f"initializing cache: {e}") from e

        client = KafkactlClient(cache)
        contexts = ContextManager(config)
        tui = K4aApp(client, contexts)
        try:
            tui.run()
        except Exception as e:
            logger.exception("Application terminated with an error")
            raise _fail(f"running program: {e}") from e
        if tui.return_code:
            raise _fail(f"program exited with status {tui.return_code}")
    finally:
        debug_log.close()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
