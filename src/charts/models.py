"""Immutable records passed between validation, renderers and the tool layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from charts.glyphs import POINT

DEFAULT_WIDTH = 60
DEFAULT_HEIGHT = 15
DEFAULT_BINS = 10
ORIENTATIONS = ("horizontal", "vertical")


@dataclass(frozen=True)
class Dataset:
    """Validated chart input."""

    data: Tuple[float, ...]
    labels: Optional[Tuple[str, ...]] = None
    title: Optional[str] = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    color: str = "white"

    @property
    def minimum(self) -> float:
        return min(self.data)

    @property
    def maximum(self) -> float:
        return max(self.data)

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int


@dataclass(frozen=True)
class ChartResult:
    """Rendered chart text plus the dimensions the renderer declares."""

    rendered_text: str
    dimensions: Dimensions
    title: Optional[str] = None


@dataclass
class HistogramBin:
    """Value range [min, max) (closed on the last bin) and its population."""

    min: float
    max: float
    count: int = 0
    frequency: float = 0.0

    def label(self) -> str:
        return f"{self.min:.1f}-{self.max:.1f}"


@dataclass(frozen=True)
class PlotPoint:
    grid_x: int
    grid_y: int
    original_x: float
    original_y: float


@dataclass(frozen=True)
class LinearRegression:
    slope: float
    intercept: float
    r_squared: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class BarChartOptions:
    orientation: str = "horizontal"
    show_values: bool = True


@dataclass(frozen=True)
class HistogramOptions:
    bins: int = DEFAULT_BINS
    show_frequency: bool = True


@dataclass(frozen=True)
class ScatterPlotOptions:
    point_char: str = POINT
    show_trend_line: bool = False


@dataclass(frozen=True)
class SparklineOptions:
    show_min_max: bool = True
    fill_char: Optional[str] = None

