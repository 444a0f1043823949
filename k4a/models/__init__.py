"""Data models for the k4a TUI."""

from k4a.models.resource import ResourceRecord

__all__ = ["ResourceRecord"]
