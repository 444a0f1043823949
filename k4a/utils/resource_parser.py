"""Resource document helpers for decoded kafkactl output.

Provides safe accessors for nested resource mappings and name-based
filtering:
- extract_value / extract_string: dotted-path lookups
- resource_name: name of a record or raw document
- filter_resources: case-insensitive substring filter on names
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")

_MISSING = object()


def extract_value(data: Mapping[str, Any], path: str) -> Any:
    """Look up a dotted path in nested mappings.

    Args:
        data: Root mapping (usually a decoded YAML document).
        path: Dotted key path, e.g. ``"metadata.name"``.

    Returns:
        The value at ``path``.

    Raises:
        KeyError: If any segment is missing or an intermediate value is
            not a mapping.
    """
    current: Any = data
    keys = path.split(".")
    for index, key in enumerate(keys):
        if not isinstance(current, Mapping):
            raise KeyError(f"invalid path at {keys[index - 1]}")
        value = current.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(f"key {key} not found")
        current = value
    return current


def extract_string(data: Mapping[str, Any], path: str, default: str = "") -> str:
    """Return the value at ``path`` as a string, or ``default`` when absent."""
    try:
        value = extract_value(data, path)
    except KeyError:
        return default
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return str(value)


def resource_name(resource: Any) -> str:
    """Return the name of a ResourceRecord or of a raw resource mapping."""
    name = getattr(resource, "name", None)
    if isinstance(name, str):
        return name
    if isinstance(resource, Mapping):
        return extract_string(resource, "metadata.name", "")
    return ""


def filter_resources(resources: Iterable[T], search: str) -> list[T]:
    """Filter resources whose name contains ``search`` (case-insensitive).

    An empty search returns every resource. Original order is preserved.
    """
    items = list(resources)
    if not search:
        return items
    needle = search.lower()
    return [item for item in items if needle in resource_name(item).lower()]


__all__ = [
    "extract_string",
    "extract_value",
    "filter_resources",
    "resource_name",
]
