"""Screens for the k4a TUI.

Resource views form a closed set: every ViewName maps to exactly one
ResourceScreen subclass.
"""

from k4a.constants.enums import ViewName
from k4a.screens.acls import AclsScreen
from k4a.screens.base_screen import ResourceScreen
from k4a.screens.commands import VIEW_ALIASES, Command, parse_command
from k4a.screens.connectors import ConnectorsScreen
from k4a.screens.consumers import ConsumersScreen
from k4a.screens.help import HelpScreen
from k4a.screens.schemas import SchemasScreen
from k4a.screens.topics import TopicsScreen

VIEW_SCREENS: dict[ViewName, type[ResourceScreen]] = {
    ViewName.TOPICS: TopicsScreen,
    ViewName.SCHEMAS: SchemasScreen,
    ViewName.CONNECTORS: ConnectorsScreen,
    ViewName.CONSUMERS: ConsumersScreen,
    ViewName.ACLS: AclsScreen,
}

__all__ = [
    "VIEW_ALIASES",
    "VIEW_SCREENS",
    "AclsScreen",
    "Command",
    "ConnectorsScreen",
    "ConsumersScreen",
    "HelpScreen",
    "ResourceScreen",
    "SchemasScreen",
    "TopicsScreen",
    "parse_command",
]
