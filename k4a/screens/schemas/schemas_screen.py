"""Schemas screen."""

from __future__ import annotations

from k4a.constants.enums import ViewName
from k4a.screens.base_screen import ResourceScreen
from k4a.screens.schemas.presenter import SchemasPresenter


class SchemasScreen(ResourceScreen):
    """Schema registry subjects."""

    view_name = ViewName.SCHEMAS
    presenter_class = SchemasPresenter
