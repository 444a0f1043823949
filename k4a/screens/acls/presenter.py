"""ACLs screen presenter."""

from __future__ import annotations

from k4a.constants.enums import ResourceKind
from k4a.constants.values import STATUS_NONE
from k4a.models.resource import ResourceRecord
from k4a.screens.acls.config import ACLS_TABLE_COLUMNS
from k4a.screens.base_presenter import ResourcePresenter
from k4a.utils.resource_parser import extract_string


class AclsPresenter(ResourcePresenter):
    """Presenter for the ACLs view."""

    kind = ResourceKind.ACLS
    label = "ACL"
    plural = "ACLs"
    columns = ACLS_TABLE_COLUMNS

    def format_row(self, record: ResourceRecord) -> tuple[str, ...]:
        spec = record.spec
        resource = extract_string(spec, "resource", STATUS_NONE)
        pattern_type = extract_string(spec, "resourcePatternType")
        pattern = f"{pattern_type} {resource}" if pattern_type else resource
        return (
            record.name,
            extract_string(spec, "resourceType", STATUS_NONE),
            pattern,
            extract_string(spec, "permission", STATUS_NONE),
            extract_string(spec, "grantedTo", STATUS_NONE),
        )
