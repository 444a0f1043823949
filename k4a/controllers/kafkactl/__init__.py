"""kafkactl controller: subprocess client, cache integration and parsers."""

from k4a.controllers.kafkactl.client import (
    KafkactlClient,
    KafkactlCommandError,
    KafkactlError,
)
from k4a.controllers.kafkactl.parsers import parse_yaml_documents

__all__ = [
    "KafkactlClient",
    "KafkactlCommandError",
    "KafkactlError",
    "parse_yaml_documents",
]
