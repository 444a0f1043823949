"""Base controller with async worker-friendly patterns for the k4a TUI.

Controllers do their blocking work (subprocess, file I/O) off the event
loop so they can be awaited from Textual workers without freezing the UI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class BaseController(ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses provide the data source specific fetching.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch(
        self,
        kind: str,
        args: Sequence[str] = (),
        force_refresh: bool = False,
    ) -> list[Any]:
        """Fetch all resources of ``kind``.

        Returns:
            Decoded resources in source order
        """
        ...


__all__ = ["BaseController"]
