"""Fixed-size character grid used as the rendering surface for charts.

Every cell carries a character and a :class:`Layer` tag. Renderers either
``set`` a cell unconditionally or ``place`` a glyph, which only lands when its
layer outranks whatever already occupies the cell. Line rasterization relies on
``place`` so connectors never overwrite points, axes or labels regardless of
the order in which a renderer composes its elements.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Optional


class Layer(IntEnum):
    """Z-order of grid content, lowest first."""

    BLANK = 0
    BACKGROUND = 1
    LINE = 2
    AXIS = 3
    MARK = 4
    LABEL = 5


class Grid:
    """Rectangular ``height`` x ``width`` matrix of single characters."""

    def __init__(self, width: int, height: int, fill: str = " "):
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self._cells: List[List[str]] = [[fill] * self.width for _ in range(self.height)]
        self._layers: List[List[Layer]] = [
            [Layer.BLANK] * self.width for _ in range(self.height)
        ]

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True when (row, col) addresses a cell of this grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def set(self, row: int, col: int, ch: str, layer: Layer = Layer.MARK) -> None:
        """Write ``ch`` at (row, col); writes outside the grid are dropped."""
        if not self.in_bounds(row, col):
            return
        self._cells[row][col] = ch
        self._layers[row][col] = layer

    def place(self, row: int, col: int, ch: str, layer: Layer) -> bool:
        """Write ``ch`` only if ``layer`` outranks the cell's current layer.

        Returns:
            True when the glyph was written.
        """
        if not self.in_bounds(row, col):
            return False
        if self._layers[row][col] >= layer:
            return False
        self._cells[row][col] = ch
        self._layers[row][col] = layer
        return True

    def get(self, row: int, col: int) -> Optional[str]:
        """Return the character at (row, col), or None outside the grid."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row][col]

    def layer_at(self, row: int, col: int) -> Layer:
        """Return the layer tag at (row, col); BLANK outside the grid."""
        if not self.in_bounds(row, col):
            return Layer.BLANK
        return self._layers[row][col]

    def row_text(self, row: int) -> str:
        """Return a single serialized row."""
        return "".join(self._cells[row])

    def serialize(self) -> str:
        """Join columns without separator and rows with newlines."""
        return "\n".join("".join(row) for row in self._cells)

    def __str__(self) -> str:
        return self.serialize()
