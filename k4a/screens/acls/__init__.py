"""ACLs screen package."""

from k4a.screens.acls.acls_screen import AclsScreen
from k4a.screens.acls.presenter import AclsPresenter

__all__ = ["AclsPresenter", "AclsScreen"]
