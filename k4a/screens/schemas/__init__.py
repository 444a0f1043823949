"""Schemas screen package."""

from k4a.screens.schemas.presenter import SchemasPresenter
from k4a.screens.schemas.schemas_screen import SchemasScreen

__all__ = ["SchemasPresenter", "SchemasScreen"]
