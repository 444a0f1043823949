"""Multi-document YAML decoding for kafkactl output."""

from __future__ import annotations

import logging
import re

import yaml
from pydantic import ValidationError

from k4a.models.resource import ResourceRecord

logger = logging.getLogger(__name__)

_DOCUMENT_SEPARATOR = re.compile(r"^---[ \t]*$", re.MULTILINE)


def split_documents(payload: str) -> list[str]:
    """Split a YAML stream on ``---`` separator lines, dropping blank parts."""
    return [part for part in _DOCUMENT_SEPARATOR.split(payload) if part.strip()]


def parse_yaml_documents(payload: bytes | str) -> list[ResourceRecord]:
    """Decode every document in ``payload`` into a ResourceRecord.

    Each part is decoded on its own so one malformed document does not
    hide its neighbours. Parts that fail to parse or validate, are not
    mappings or carry no name are skipped. Order is preserved.
    """
    text = payload.decode("utf-8", errors="replace") if isinstance(payload, bytes) else payload
    records: list[ResourceRecord] = []
    for index, part in enumerate(split_documents(text)):
        try:
            document = yaml.safe_load(part)
        except yaml.YAMLError as e:
            logger.debug(f"Skipping document {index}: {e}")
            continue
        if not isinstance(document, dict):
            logger.debug(f"Skipping document {index}: not a mapping")
            continue
        try:
            record = ResourceRecord.from_document(document)
        except ValidationError as e:
            logger.debug(f"Skipping document {index}: {e.error_count()} invalid field(s)")
            continue
        if record is None:
            logger.debug(f"Skipping document {index}: no name")
            continue
        records.append(record)
    return records


__all__ = ["parse_yaml_documents", "split_documents"]
