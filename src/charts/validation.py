"""Input contract checks that turn raw tool parameters into a Dataset.

This is the only gate between callers and the renderers: once a Dataset comes
out of :func:`validate_chart_data`, renderers may assume non-empty finite data,
matching labels, in-range dimensions and a known color.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Mapping, Optional

from charts.colors import DEFAULT_COLOR, get_color_list, is_valid_color
from charts.models import DEFAULT_HEIGHT, DEFAULT_WIDTH, ORIENTATIONS, Dataset

MIN_WIDTH, MAX_WIDTH = 10, 200
MIN_HEIGHT, MAX_HEIGHT = 5, 50
MIN_BINS, MAX_BINS = 3, 50

EMPTY_DATA = "Data array cannot be empty"
INVALID_DATA = "Data must be an array of numbers"
INVALID_DATA_TYPE = "All data values must be valid numbers"
INFINITE_VALUES = "Data contains infinite values"
INVALID_LABELS = "Labels must be an array of strings"
MISMATCHED_LABELS = "Labels array must have the same length as data array"
INVALID_WIDTH = f"Width must be a number between {MIN_WIDTH} and {MAX_WIDTH}"
INVALID_HEIGHT = f"Height must be a number between {MIN_HEIGHT} and {MAX_HEIGHT}"
INVALID_COLOR_TYPE = "Color must be a string"
INVALID_TITLE = "Title must be a string"
INVALID_ORIENTATION = "Orientation must be 'horizontal' or 'vertical'"


class ValidationError(ValueError):
    """Raised when chart input does not satisfy the input contract."""


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _to_float(value: Any) -> Optional[float]:
    """``float(value)``, or None for integers beyond the float range."""
    try:
        return float(value)
    except OverflowError:
        return None


def _is_integral(value: Any) -> bool:
    if not _is_number(value):
        return False
    as_float = _to_float(value)
    return as_float is not None and math.isfinite(as_float) and int(value) == value


def _validate_dimension(value: Any, lo: int, hi: int, message: str, default: int) -> int:
    if value is None:
        return default
    if not _is_integral(value):
        raise ValidationError(message)
    if value < lo or value > hi:
        raise ValidationError(message)
    return int(value)


def invalid_color_message() -> str:
    return f"Invalid color. Available colors: {', '.join(get_color_list())}"


def validate_chart_data(params: Mapping[str, Any]) -> Dataset:
    """Check raw parameters and return a normalized :class:`Dataset`.

    Raises:
        ValidationError: with one of the module-level messages.
    """
    data = params.get("data")
    if not _is_sequence(data):
        raise ValidationError(INVALID_DATA)
    if len(data) == 0:
        raise ValidationError(EMPTY_DATA)
    if not all(_is_number(v) for v in data):
        raise ValidationError(INVALID_DATA_TYPE)
    values = [_to_float(v) for v in data]
    if any(v is not None and math.isnan(v) for v in values):
        raise ValidationError(INVALID_DATA_TYPE)
    if not all(v is not None and math.isfinite(v) for v in values):
        raise ValidationError(INFINITE_VALUES)

    labels = params.get("labels")
    if labels is not None:
        if not _is_sequence(labels) or not all(isinstance(label, str) for label in labels):
            raise ValidationError(INVALID_LABELS)
        if len(labels) != len(data):
            raise ValidationError(MISMATCHED_LABELS)

    width = _validate_dimension(
        params.get("width"), MIN_WIDTH, MAX_WIDTH, INVALID_WIDTH, DEFAULT_WIDTH
    )
    height = _validate_dimension(
        params.get("height"), MIN_HEIGHT, MAX_HEIGHT, INVALID_HEIGHT, DEFAULT_HEIGHT
    )

    color = params.get("color")
    if color is not None:
        if not isinstance(color, str):
            raise ValidationError(INVALID_COLOR_TYPE)
        if not is_valid_color(color):
            raise ValidationError(invalid_color_message())

    title = params.get("title")
    if title is not None and not isinstance(title, str):
        raise ValidationError(INVALID_TITLE)

    return Dataset(
        data=tuple(values),
        labels=tuple(labels) if labels is not None else None,
        title=title or None,
        width=width,
        height=height,
        color=color or DEFAULT_COLOR,
    )


def validate_numeric_range(value: Any, lo: int, hi: int, name: str) -> int:
    """Require an integer within [lo, hi]."""
    message = f"{name} must be between {lo} and {hi}"
    if not _is_integral(value):
        raise ValidationError(message)
    if value < lo or value > hi:
        raise ValidationError(message)
    return int(value)


def validate_bins(bins: Optional[Any], default: int) -> int:
    if bins is None:
        return default
    return validate_numeric_range(bins, MIN_BINS, MAX_BINS, "Number of bins")


def validate_orientation(orientation: Optional[Any]) -> str:
    if orientation is None:
        return ORIENTATIONS[0]
    if orientation not in ORIENTATIONS:
        raise ValidationError(INVALID_ORIENTATION)
    return orientation


def validate_single_char(value: Optional[Any], name: str) -> Optional[str]:
    """Glyph overrides must be exactly one character."""
    if value is None:
        return None
    if not isinstance(value, str) or len(value) != 1:
        raise ValidationError(f"{name} must be a single character")
    return value


def validate_flag(value: Optional[Any], name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"{name} must be a boolean")
    return value
