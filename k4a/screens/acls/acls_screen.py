"""ACLs screen."""

from __future__ import annotations

from k4a.constants.enums import ViewName
from k4a.screens.acls.presenter import AclsPresenter
from k4a.screens.base_screen import ResourceScreen


class AclsScreen(ResourceScreen):
    """Access control entries of the namespace."""

    view_name = ViewName.ACLS
    presenter_class = AclsPresenter
