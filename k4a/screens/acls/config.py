"""ACLs screen configuration - column definitions."""

from __future__ import annotations

ACLS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 40),
    ("Resource Type", 15),
    ("Pattern", 40),
    ("Permission", 12),
    ("Principal", 25),
]
