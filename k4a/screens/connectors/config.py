"""Connectors screen configuration - column definitions and config keys."""

from __future__ import annotations

CONNECTORS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 40),
    ("Class", 40),
    ("Type", 10),
    ("State", 10),
    ("Tasks", 10),
    ("Connect Cluster", 20),
]

CONNECTOR_CLASS_KEY = "connector.class"
TASKS_MAX_KEY = "tasks.max"
TASKS_DEFAULT = "1"

# First path present wins
CONNECTOR_STATE_PATHS: tuple[str, ...] = ("status.state", "status.connector.state")
