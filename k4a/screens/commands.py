"""Parsing of ``:`` prompt commands."""

from __future__ import annotations

from dataclasses import dataclass

from k4a.constants.enums import CommandKind, ViewName
from k4a.constants.values import COMMAND_PROMPT, QUIT_COMMANDS

VIEW_ALIASES: dict[str, ViewName] = {
    "topics": ViewName.TOPICS,
    "topic": ViewName.TOPICS,
    "schemas": ViewName.SCHEMAS,
    "schema": ViewName.SCHEMAS,
    "connectors": ViewName.CONNECTORS,
    "connector": ViewName.CONNECTORS,
    "consumers": ViewName.CONSUMERS,
    "consumer": ViewName.CONSUMERS,
    "acls": ViewName.ACLS,
    "acl": ViewName.ACLS,
}

CONTEXT_COMMANDS = frozenset({"ctx", "context"})
NAMESPACE_COMMANDS = frozenset({"ns", "namespace"})
HELP_COMMANDS = frozenset({"help", "h"})


@dataclass(frozen=True)
class Command:
    """A parsed prompt command."""

    kind: CommandKind
    text: str = ""
    view: ViewName | None = None
    argument: str = ""


def parse_command(text: str) -> Command:
    """Parse prompt input such as ``topics``, ``:ctx prod`` or ``cache clear``.

    The first word selects the command (case-insensitive); the rest is its
    argument. Anything unrecognised parses as ``CommandKind.UNKNOWN``.
    """
    stripped = text.strip()
    if stripped.startswith(COMMAND_PROMPT):
        stripped = stripped[len(COMMAND_PROMPT):].strip()
    if not stripped:
        return Command(CommandKind.EMPTY)

    word, _, rest = stripped.partition(" ")
    word = word.lower()
    argument = rest.strip()

    if word in QUIT_COMMANDS:
        return Command(CommandKind.QUIT, stripped)
    if word in VIEW_ALIASES:
        return Command(CommandKind.VIEW, stripped, view=VIEW_ALIASES[word])
    if word in CONTEXT_COMMANDS:
        return Command(CommandKind.CONTEXT, stripped, argument=argument)
    if word in NAMESPACE_COMMANDS:
        return Command(CommandKind.NAMESPACE, stripped, argument=argument)
    if word in HELP_COMMANDS:
        return Command(CommandKind.HELP, stripped)
    if word == "cache" and argument.lower() == "clear":
        return Command(CommandKind.CACHE_CLEAR, stripped)
    return Command(CommandKind.UNKNOWN, stripped)


__all__ = [
    "VIEW_ALIASES",
    "Command",
    "parse_command",
]
