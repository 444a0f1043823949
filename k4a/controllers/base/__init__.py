"""Base controller classes."""

from k4a.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
