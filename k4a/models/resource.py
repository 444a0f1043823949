"""Resource record model for decoded kafkactl documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import BaseModel, Field


class ResourceRecord(BaseModel):
    """One decoded resource document.

    ``document`` keeps the full mapping as kafkactl returned it; the other
    fields are projections of it used by tables and filtering.
    """

    name: str
    kind: str = ""
    api_version: str = ""
    namespace: str = ""
    spec: dict[str, Any] = Field(default_factory=dict)
    status: dict[str, Any] | None = None
    document: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> ResourceRecord | None:
        """Build a record from a decoded YAML mapping.

        The name comes from ``metadata.name`` and falls back to a top-level
        ``name`` key. Documents without a usable name yield ``None``.
        """
        metadata = document.get("metadata")
        if not isinstance(metadata, Mapping):
            metadata = {}
        name = metadata.get("name", document.get("name"))
        if name is None or isinstance(name, (Mapping, list)):
            return None
        name = str(name)
        if not name:
            return None

        spec = document.get("spec")
        status = document.get("status")
        return cls(
            name=name,
            kind=str(document.get("kind") or ""),
            api_version=str(document.get("apiVersion") or ""),
            namespace=str(metadata.get("namespace") or ""),
            spec=dict(spec) if isinstance(spec, Mapping) else {},
            status=dict(status) if isinstance(status, Mapping) else None,
            document=dict(document),
        )

    def to_yaml(self) -> str:
        """Serialize the decoded document back to YAML.

        Raises:
            yaml.YAMLError: If the document holds values YAML cannot represent.
        """
        return yaml.safe_dump(
            self.document,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )


__all__ = ["ResourceRecord"]
