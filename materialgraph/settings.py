"""
Node editor settings.

Layout constants for graph construction and persisted panel widths.
Uses QSettings for cross-platform storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from PyQt6.QtCore import QSettings


@dataclass(frozen=True)
class LayoutSettings:
    """Spacing of the column/row grid used when placing constructed nodes."""
    base_x: float = 1600.0
    column_spacing: float = 300.0
    row_spacing: float = 210.0

    def position(self, column: int, row: int) -> tuple[float, float]:
        return (self.base_x - self.column_spacing * column, self.row_spacing * row)


class EditorSettings:
    """
    Node editor settings manager.

    Singleton access through instance(); tests pass their own QSettings
    (e.g. an ini file in a temporary directory) to the constructor.
    """

    _instance: "EditorSettings | None" = None

    KEY_BASE_X = "NodeEditor/BaseX"
    KEY_COLUMN_SPACING = "NodeEditor/ColumnSpacing"
    KEY_ROW_SPACING = "NodeEditor/RowSpacing"
    KEY_LEFT_WIDTH = "NodeEditor/LeftWidth"
    KEY_RIGHT_WIDTH = "NodeEditor/RightWidth"

    LEFT_WIDTH_DEFAULT = 200
    LEFT_WIDTH_RANGE = (150, 400)
    RIGHT_WIDTH_DEFAULT = 300
    RIGHT_WIDTH_RANGE = (250, 500)

    def __init__(self, settings: Optional[QSettings] = None):
        self._settings = settings if settings is not None else QSettings("MaterialGraph", "NodeEditor")

    @classmethod
    def instance(cls) -> "EditorSettings":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.value(key, default)

    def set(self, key: str, value: Any) -> None:
        self._settings.setValue(key, value)

    def sync(self) -> None:
        """Force settings to disk."""
        self._settings.sync()

    def _get_float(self, key: str, default: float) -> float:
        value = self.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    # --- Layout ---

    def layout(self) -> LayoutSettings:
        defaults = LayoutSettings()
        return LayoutSettings(
            base_x=self._get_float(self.KEY_BASE_X, defaults.base_x),
            column_spacing=self._get_float(self.KEY_COLUMN_SPACING, defaults.column_spacing),
            row_spacing=self._get_float(self.KEY_ROW_SPACING, defaults.row_spacing),
        )

    # --- Panel widths ---

    def get_left_width(self) -> int:
        return self._clamp(
            self._get_float(self.KEY_LEFT_WIDTH, self.LEFT_WIDTH_DEFAULT),
            self.LEFT_WIDTH_RANGE,
        )

    def set_left_width(self, width: float) -> int:
        """Store clamped width, returns the stored value."""
        width = self._clamp(width, self.LEFT_WIDTH_RANGE)
        self.set(self.KEY_LEFT_WIDTH, width)
        return width

    def get_right_width(self) -> int:
        return self._clamp(
            self._get_float(self.KEY_RIGHT_WIDTH, self.RIGHT_WIDTH_DEFAULT),
            self.RIGHT_WIDTH_RANGE,
        )

    def set_right_width(self, width: float) -> int:
        width = self._clamp(width, self.RIGHT_WIDTH_RANGE)
        self.set(self.KEY_RIGHT_WIDTH, width)
        return width

    @staticmethod
    def _clamp(value: float, bounds: tuple[int, int]) -> int:
        low, high = bounds
        return int(max(low, min(high, value)))
