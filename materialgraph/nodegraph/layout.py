"""Layout bookkeeping for graph construction."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from materialgraph.settings import LayoutSettings


class LayoutState:
    """
    Last used row per column.

    Created fresh for every full construction pass and threaded through it;
    never persisted.
    """

    def __init__(self, settings: Optional[LayoutSettings] = None):
        self.settings = settings or LayoutSettings()
        self._last_row: Dict[int, int] = {}

    def next_row(self, column: int) -> int:
        """Allocate the next row of a column: 0 for an unused column."""
        last = self._last_row.get(column)
        row = 0 if last is None else last + 1
        self._last_row[column] = row
        return row

    def last_row(self, column: int) -> Optional[int]:
        return self._last_row.get(column)

    def allocate(self, column: int) -> Tuple[int, float, float]:
        """Allocate a cell in column, returns (row, x, y)."""
        row = self.next_row(column)
        x, y = self.settings.position(column, row)
        return row, x, y

    def __repr__(self) -> str:
        return f"<LayoutState {self._last_row}>"
