"""Unit tests for prompt command parsing."""

from __future__ import annotations

import pytest

from k4a.constants.enums import CommandKind, ViewName
from k4a.screens.commands import parse_command


@pytest.mark.parametrize(
    ("text", "view"),
    [
        ("topics", ViewName.TOPICS),
        ("topic", ViewName.TOPICS),
        (":schemas", ViewName.SCHEMAS),
        ("Connectors", ViewName.CONNECTORS),
        ("consumers", ViewName.CONSUMERS),
        ("  acls  ", ViewName.ACLS),
    ],
)
def test_view_commands(text: str, view: ViewName) -> None:
    command = parse_command(text)
    assert command.kind is CommandKind.VIEW
    assert command.view is view


@pytest.mark.parametrize("text", ["q", "quit", ":Q", "QUIT"])
def test_quit(text: str) -> None:
    assert parse_command(text).kind is CommandKind.QUIT


@pytest.mark.parametrize("text", ["", "   ", ":"])
def test_empty(text: str) -> None:
    assert parse_command(text).kind is CommandKind.EMPTY


def test_context_with_argument() -> None:
    command = parse_command("ctx  prod ")
    assert command.kind is CommandKind.CONTEXT
    assert command.argument == "prod"


def test_context_without_argument() -> None:
    command = parse_command(":context")
    assert command.kind is CommandKind.CONTEXT
    assert command.argument == ""


def test_namespace() -> None:
    command = parse_command("ns team-b")
    assert command.kind is CommandKind.NAMESPACE
    assert command.argument == "team-b"


def test_help() -> None:
    assert parse_command("help").kind is CommandKind.HELP


def test_cache_clear() -> None:
    assert parse_command("cache clear").kind is CommandKind.CACHE_CLEAR
    assert parse_command("cache").kind is CommandKind.UNKNOWN


def test_unknown_keeps_text() -> None:
    command = parse_command(":bogus thing")
    assert command.kind is CommandKind.UNKNOWN
    assert command.text == "bogus thing"
