"""Help screen configuration - sections of (key, description) pairs."""

from __future__ import annotations

HELP_TITLE = "K4A Help"

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("↑/k", "Move up"),
            ("↓/j", "Move down"),
            ("g", "Go to top"),
            ("G", "Go to bottom"),
        ],
    ),
    (
        "Actions",
        [
            ("enter", "Consumer groups of topic"),
            ("esc", "Go back"),
            ("d", "Describe resource"),
            ("r", "Refresh view"),
            ("R / ctrl+r", "Force refresh"),
            ("/", "Filter resources"),
        ],
    ),
    (
        "View Commands",
        [
            (":topics", "Switch to topics view"),
            (":schemas", "Switch to schemas view"),
            (":connectors", "Switch to connectors view"),
            (":consumers", "Switch to consumers view"),
            (":acls", "Switch to ACLs view"),
            (":ctx <name>", "Switch context"),
            (":ns <name>", "Switch namespace"),
            (":cache clear", "Drop cached kafkactl output"),
        ],
    ),
    (
        "Connector Actions",
        [
            ("p", "Pause connector"),
            ("s", "Resume connector"),
            ("t", "Restart connector"),
        ],
    ),
    (
        "General",
        [
            (":", "Enter command mode"),
            ("?", "Toggle this help"),
            ("q", "Quit application"),
            ("ctrl+c", "Force quit"),
        ],
    ),
]

HELP_KEY_WIDTH = 15
