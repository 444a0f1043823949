"""ResourceTable widget - row-cursor DataTable keyed by resource name."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextlib import suppress
from typing import TYPE_CHECKING, Any

from textual.containers import Container
from textual.coordinate import Coordinate
from textual.widgets import DataTable as TextualDataTable
from textual.widgets.data_table import CellDoesNotExist, RowDoesNotExist

if TYPE_CHECKING:
    from textual.app import ComposeResult

logger = logging.getLogger(__name__)


class ResourceTable(Container):
    """Wrapper around Textual's DataTable for resource listings.

    Rows are keyed by resource name. Replacing the rows keeps the cursor on
    the same name when it is still present.

    Example:
        ```python
        table = ResourceTable(columns=[("Name", 40), ("Partitions", 10)], id="topics-table")
        table.set_rows([("orders", ("orders", "6"))])
        ```
    """

    DEFAULT_CSS = """
    ResourceTable {
        height: 1fr;
        width: 1fr;
        min-height: 3;
    }
    ResourceTable > DataTable {
        height: 1fr;
        width: 1fr;
        border: none;
        background: transparent;
    }
    """

    def __init__(
        self,
        columns: Sequence[tuple[str, int]] | None = None,
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = False,
    ) -> None:
        """Initialize the table wrapper.

        Args:
            columns: (label, width) column definitions.
            id: Widget ID.
            classes: Extra CSS classes.
            zebra_stripes: Whether to display alternating row colors.
        """
        super().__init__(id=id, classes=f"resource-table {classes}".strip())
        self._columns = list(columns or [])
        self._zebra_stripes = zebra_stripes
        self._inner_widget: TextualDataTable | None = None
        self._row_keys: list[str] = []
        self._rows: list[tuple[str, Sequence[Any]]] = []

    def compose(self) -> ComposeResult:
        table: TextualDataTable[Any] = TextualDataTable(cursor_type="row", zebra_stripes=self._zebra_stripes)
        self._inner_widget = table
        yield table

    def on_mount(self) -> None:
        if self._inner_widget is None:
            return
        for label, width in self._columns:
            self._inner_widget.add_column(label, width=width, key=label)
        if self._rows:
            self.set_rows(self._rows)

    @property
    def data_table(self) -> TextualDataTable | None:
        """The composed Textual DataTable, or None before composition."""
        return self._inner_widget

    @property
    def row_keys(self) -> list[str]:
        return list(self._row_keys)

    @property
    def row_count(self) -> int:
        return len(self._row_keys)

    def set_rows(self, rows: Sequence[tuple[str, Sequence[Any]]]) -> None:
        """Replace all rows with ``(key, cells)`` pairs."""
        table = self._inner_widget
        previous = self.selected_key
        self._rows = list(rows)
        self._row_keys = [key for key, _ in self._rows]
        if table is None or not table.columns:
            return
        with table.batch_update():
            table.clear()
            seen: set[str] = set()
            for key, cells in self._rows:
                # DataTable rejects duplicate keys
                row_key = key if key not in seen else None
                seen.add(key)
                table.add_row(*cells, key=row_key)
        if previous in self._row_keys:
            table.move_cursor(row=self._row_keys.index(previous), animate=False)

    def clear(self) -> None:
        self._row_keys = []
        self._rows = []
        if self._inner_widget is not None:
            self._inner_widget.clear()

    @property
    def cursor_row(self) -> int | None:
        if self._inner_widget is None or not self._row_keys:
            return None
        return self._inner_widget.cursor_row

    @property
    def selected_key(self) -> str | None:
        """Key (resource name) of the row under the cursor."""
        row = self.cursor_row
        if row is None or self._inner_widget is None:
            return None
        with suppress(CellDoesNotExist, RowDoesNotExist):
            row_key, _ = self._inner_widget.coordinate_to_cell_key(Coordinate(row, 0))
            if row_key.value is not None:
                return str(row_key.value)
        if 0 <= row < len(self._row_keys):
            return self._row_keys[row]
        return None

    # =========================================================================
    # Cursor movement
    # =========================================================================

    def move_cursor(self, row: int) -> None:
        if self._inner_widget is None or not self._row_keys:
            return
        row = max(0, min(row, len(self._row_keys) - 1))
        self._inner_widget.move_cursor(row=row, animate=False)

    def cursor_down(self) -> None:
        self.move_cursor((self.cursor_row or 0) + 1)

    def cursor_up(self) -> None:
        self.move_cursor((self.cursor_row or 0) - 1)

    def cursor_top(self) -> None:
        self.move_cursor(0)

    def cursor_bottom(self) -> None:
        self.move_cursor(len(self._row_keys) - 1)

    def set_visible_height(self, height: int) -> None:
        """Fix the widget height (column header plus visible rows)."""
        self.styles.height = max(1, height)

    def focus_table(self) -> None:
        if self._inner_widget is not None:
            self._inner_widget.focus()
