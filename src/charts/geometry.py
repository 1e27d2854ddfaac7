"""Value mapping, text layout and line rasterization helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from charts import glyphs
from charts.grid import Grid, Layer

Point = Tuple[int, int]


def normalize(value: float, lo: float, hi: float) -> float:
    """Map ``value`` linearly into [0, 1] over [lo, hi].

    Degenerate ranges (``hi == lo``) return 0; callers that need a visible
    placement for flat data substitute their own mid-scale value.
    """
    if hi == lo:
        return 0.0
    return (value - lo) / (hi - lo)


def clamp(value, lo, hi):
    """Clamp ``value`` into [lo, hi]."""
    return max(lo, min(hi, value))


def pad_left(text: str, width: int, fill: str = " ") -> str:
    return text.rjust(width, fill)


def pad_right(text: str, width: int, fill: str = " ") -> str:
    return text.ljust(width, fill)


def center(text: str, width: int, fill: str = " ") -> str:
    """Center ``text``; an odd leftover space goes to the right side."""
    total = width - len(text)
    if total <= 0:
        return text
    left = total // 2
    return fill * left + text + fill * (total - left)


def format_number(value: float, precision: int = 2) -> str:
    """Fixed-point formatting without a negative-zero sign."""
    text = f"{value:.{precision}f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


def write_text(grid: Grid, row: int, col: int, text: str, layer: Layer = Layer.LABEL) -> None:
    """Write ``text`` left to right starting at (row, col)."""
    for offset, ch in enumerate(text):
        grid.set(row, col + offset, ch, layer)


@dataclass(frozen=True)
class PlotArea:
    """Cells of a grid that a data series may draw into."""

    left: int
    width: int
    height: int
    top: int = 0

    def contains(self, row: int, col: int) -> bool:
        in_rows = self.top <= row < self.top + self.height
        return in_rows and self.left <= col < self.left + self.width

    @property
    def last_row(self) -> int:
        return self.top + self.height - 1


def connector_glyph(start: Point, end: Point) -> str:
    """Pick the glyph for a segment from its overall slope."""
    dx = abs(end[0] - start[0])
    dy = abs(end[1] - start[1])
    if dx > dy:
        return glyphs.HORIZONTAL
    if dy > dx:
        return glyphs.VERTICAL
    return glyphs.CURVE_UP_RIGHT if start[0] < end[0] else glyphs.CURVE_UP_LEFT


def draw_line(
    grid: Grid,
    start: Point,
    end: Point,
    area: PlotArea,
    glyph: Optional[str] = None,
) -> int:
    """Rasterize a segment between two (x, y) grid points with Bresenham's walk.

    Only cells inside ``area`` that hold nothing above background are written,
    so points, axes and labels already on the grid survive.

    Returns:
        Number of cells written.
    """
    x1, y1 = start
    x2, y2 = end
    ch = glyph or connector_glyph(start, end)

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    x, y = x1, y1
    written = 0
    while True:
        if area.contains(y, x) and grid.place(y, x, ch, Layer.LINE):
            written += 1

        if x == x2 and y == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return written
