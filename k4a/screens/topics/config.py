"""Topics screen configuration - column definitions and widget IDs."""

from __future__ import annotations

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

TOPICS_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 40),
    ("Partitions", 12),
    ("Replication", 12),
    ("Retention", 15),
    ("Description", 30),
]

CONSUMER_GROUPS_OVERLAY_COLUMNS: list[tuple[str, int]] = [
    ("Group ID", 30),
    ("State", 15),
    ("Members", 10),
    ("Lag", 15),
]

# =============================================================================
# Widget IDs
# =============================================================================

CONSUMER_GROUPS_TABLE_ID = "consumer-groups-table"
CONSUMER_GROUPS_TITLE_ID = "consumer-groups-title"

# Topic config key holding the retention in milliseconds
RETENTION_CONFIG_KEY = "retention.ms"
