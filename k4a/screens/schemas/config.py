"""Schemas screen configuration - column definitions and display defaults."""

from __future__ import annotations

SCHEMAS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Subject", 50),
    ("Version", 10),
    ("ID", 10),
    ("Type", 15),
    ("Compatibility", 20),
]

SCHEMA_VERSION_DEFAULT = "latest"
SCHEMA_TYPE_DEFAULT = "AVRO"
SCHEMA_COMPATIBILITY_DEFAULT = "BACKWARD"
