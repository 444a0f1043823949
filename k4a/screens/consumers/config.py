"""Consumers screen configuration - column definitions."""

from __future__ import annotations

CONSUMER_GROUPS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Group ID", 30),
    ("State", 15),
    ("Members", 10),
    ("Lag", 15),
]

# First path present wins
GROUP_STATE_PATHS: tuple[str, ...] = ("status.state", "spec.state")
GROUP_MEMBERS_PATHS: tuple[str, ...] = ("status.members", "spec.members")
GROUP_LAG_PATHS: tuple[str, ...] = ("status.lag", "status.totalLag", "spec.lag")
