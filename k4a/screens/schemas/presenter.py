"""Schemas screen presenter."""

from __future__ import annotations

from k4a.constants.enums import ResourceKind
from k4a.constants.values import STATUS_NONE
from k4a.models.resource import ResourceRecord
from k4a.screens.base_presenter import ResourcePresenter
from k4a.screens.schemas.config import (
    SCHEMA_COMPATIBILITY_DEFAULT,
    SCHEMA_TYPE_DEFAULT,
    SCHEMA_VERSION_DEFAULT,
    SCHEMAS_TABLE_COLUMNS,
)
from k4a.utils.resource_parser import extract_string


class SchemasPresenter(ResourcePresenter):
    """Presenter for the schemas view. Unset fields show registry defaults."""

    kind = ResourceKind.SCHEMAS
    label = "Schema"
    plural = "schemas"
    columns = SCHEMAS_TABLE_COLUMNS

    def format_row(self, record: ResourceRecord) -> tuple[str, ...]:
        spec = record.spec
        return (
            record.name,
            extract_string(spec, "version", SCHEMA_VERSION_DEFAULT),
            extract_string(spec, "id", STATUS_NONE),
            extract_string(spec, "type", SCHEMA_TYPE_DEFAULT),
            extract_string(spec, "compatibility", SCHEMA_COMPATIBILITY_DEFAULT),
        )
