"""Summary statistics, binning and regression used by the renderers."""

from __future__ import annotations

from typing import List, Sequence

from charts.models import HistogramBin, LinearRegression


def mean(values: Sequence[float]) -> float:
    if not values:
        raise ValueError("Data array cannot be empty")
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Middle element, or the mean of the two middle elements for even counts."""
    if not values:
        raise ValueError("Data array cannot be empty")
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def histogram_bins(values: Sequence[float], num_bins: int) -> List[HistogramBin]:
    """Split [min, max] into ``num_bins`` equal-width bins and count values.

    Bins are half-open ``[min, max)`` except the last, which also takes the
    maximum itself. Each value lands in exactly one bin: the first whose range
    contains it.
    """
    if not values:
        raise ValueError("Data array cannot be empty")
    if num_bins < 1:
        raise ValueError("Number of bins must be positive")

    lo = min(values)
    hi = max(values)
    bin_width = (hi - lo) / num_bins

    bins = []
    for i in range(num_bins):
        bin_min = lo + i * bin_width
        bin_max = hi if i == num_bins - 1 else lo + (i + 1) * bin_width
        bins.append(HistogramBin(min=bin_min, max=bin_max))

    last = len(bins) - 1
    for value in values:
        for i, b in enumerate(bins):
            upper_ok = value <= b.max if i == last else value < b.max
            if value >= b.min and upper_ok:
                b.count += 1
                break
        else:
            # Float drift at a bin edge; the value is still within [lo, hi].
            bins[last].count += 1

    total = len(values)
    for b in bins:
        b.frequency = b.count / total
    return bins


def linear_regression(xs: Sequence[float], ys: Sequence[float]) -> LinearRegression:
    """Ordinary least squares fit of ``ys`` against ``xs``.

    R-squared is 1.0 when ``ys`` has no variance (the flat fit is exact).
    """
    n = len(xs)
    if n != len(ys):
        raise ValueError("x and y sequences must have the same length")
    if n < 2:
        raise ValueError("At least 2 points required for linear regression")

    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_xx = sum(x * x for x in xs)

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        raise ValueError("x values must not all be equal")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    y_mean = sum_y / n
    ss_res = sum((y - (slope * x + intercept)) ** 2 for x, y in zip(xs, ys))
    ss_tot = sum((y - y_mean) ** 2 for y in ys)
    r_squared = 1.0 if ss_tot == 0 else 1 - ss_res / ss_tot

    return LinearRegression(slope=slope, intercept=intercept, r_squared=r_squared)
