"""Tests for summary statistics, binning and regression."""

import pytest

from charts.stats import histogram_bins, linear_regression, mean, median


def test_mean():
    assert mean([1, 2, 3, 4]) == 2.5


def test_median_odd_and_even():
    assert median([3, 1, 2]) == 2
    assert median([4, 1, 3, 2]) == 2.5


def test_empty_input_is_rejected():
    with pytest.raises(ValueError):
        mean([])
    with pytest.raises(ValueError):
        median([])
    with pytest.raises(ValueError):
        histogram_bins([], 5)


def test_histogram_bins_are_half_open_with_closed_last_bin():
    bins = histogram_bins([1, 2, 3, 4], 2)

    assert [(b.min, b.max) for b in bins] == [(1.0, 2.5), (2.5, 4)]
    assert [b.count for b in bins] == [2, 2]
    assert [b.frequency for b in bins] == [0.5, 0.5]


def test_histogram_counts_sum_to_input_size():
    """Every value lands in exactly one bin."""
    values = [0.1 * i for i in range(97)] + [3.3, 3.3, 9.6]
    for num_bins in (3, 7, 10, 50):
        bins = histogram_bins(values, num_bins)
        assert len(bins) == num_bins
        assert sum(b.count for b in bins) == len(values)


def test_histogram_maximum_lands_in_last_bin():
    bins = histogram_bins([0, 10], 5)
    assert bins[-1].count == 1
    assert bins[0].count == 1


def test_histogram_flat_data_goes_to_last_bin():
    bins = histogram_bins([5, 5, 5], 3)
    assert [b.count for b in bins] == [0, 0, 3]


def test_histogram_bin_label():
    bins = histogram_bins([0, 10], 4)
    assert bins[0].label() == "0.0-2.5"


def test_linear_regression_exact_fit():
    fit = linear_regression([0, 1, 2, 3], [1, 3, 5, 7])

    assert fit.slope == pytest.approx(2.0)
    assert fit.intercept == pytest.approx(1.0)
    assert fit.r_squared == pytest.approx(1.0)
    assert fit.predict(4) == pytest.approx(9.0)


def test_linear_regression_flat_series_has_perfect_fit():
    fit = linear_regression([0, 1, 2], [4, 4, 4])

    assert fit.slope == 0
    assert fit.intercept == 4
    assert fit.r_squared == 1.0


def test_linear_regression_noisy_fit_has_partial_r_squared():
    fit = linear_regression([0, 1, 2, 3], [1, 3, 2, 4])
    assert 0 < fit.r_squared < 1


def test_linear_regression_requires_two_points():
    with pytest.raises(ValueError):
        linear_regression([1], [1])
    with pytest.raises(ValueError):
        linear_regression([1, 2], [1])
