"""Tests for the bar chart renderers."""

import pytest

from charts import glyphs
from charts.bar import bar_fraction, partial_block, render_bar_chart
from charts.models import BarChartOptions, Dataset

BLOCK = glyphs.FULL_BLOCK


def _lines(result):
    return result.rendered_text.split("\n")


@pytest.fixture
def quarterly():
    return Dataset(data=(10.0, 20.0, 15.0, 25.0), labels=("A", "B", "C", "D"), width=40, height=10)


def test_horizontal_bars_scale_to_largest_value(quarterly):
    """The largest value fills the bar area; smaller ones end in a partial block."""
    lines = _lines(render_bar_chart(quarterly))

    assert len(lines) == 4
    assert lines[0] == "A " + BLOCK * 9 + glyphs.MEDIUM_SHADE + " 10.0"
    assert lines[1] == "B " + BLOCK * 19 + " 20.0"
    assert lines[2] == "C " + BLOCK * 14 + glyphs.LIGHT_SHADE + " 15.0"
    assert lines[3] == "D " + BLOCK * 24 + " 25.0"


def test_horizontal_without_values(quarterly):
    lines = _lines(render_bar_chart(quarterly, BarChartOptions(show_values=False)))
    assert lines[3] == "D " + BLOCK * 24


def test_missing_labels_use_item_numbers():
    lines = _lines(render_bar_chart(Dataset(data=(1.0, 2.0), width=40, height=10)))
    assert lines[0].startswith("Item 1 ")
    assert lines[1].startswith("Item 2 ")


def test_blank_label_fallback_keeps_bars_aligned():
    dataset = Dataset(
        data=(10.0, 20.0, 15.0), labels=("Alpha", "", "Gamma"), width=40, height=10
    )
    lines = _lines(render_bar_chart(dataset))

    assert lines[1].startswith("Item  " + BLOCK)
    assert {line.index(BLOCK) for line in lines} == {6}


def test_negative_values_keep_zero_baseline():
    lines = _lines(render_bar_chart(Dataset(data=(-5.0, 5.0), width=40, height=10)))
    assert lines[0] == "Item 1  -5.0"
    assert BLOCK in lines[1]


def test_bar_count_is_limited_by_height():
    dataset = Dataset(data=tuple(float(v) for v in range(1, 13)), width=40, height=5)
    assert len(_lines(render_bar_chart(dataset))) == 5

    titled = Dataset(data=dataset.data, title="T", width=40, height=5)
    lines = _lines(render_bar_chart(titled))
    assert len(lines) == 5
    assert lines[0].strip() == "T"


def test_vertical_bars_have_axis_and_labels():
    dataset = Dataset(data=(1.0, 2.0, 3.0, 4.0), labels=("A", "B", "C", "D"), width=20, height=10)
    result = render_bar_chart(dataset, BarChartOptions(orientation="vertical"))
    lines = _lines(result)

    assert len(lines) == 10
    assert lines[8] == glyphs.HORIZONTAL * 20
    for label in ("A", "B", "C", "D"):
        assert label in lines[9]
    assert BLOCK in result.rendered_text
    assert "4.0" in result.rendered_text
    assert (result.dimensions.width, result.dimensions.height) == (20, 10)


def test_unknown_orientation_is_rejected(quarterly):
    with pytest.raises(ValueError):
        render_bar_chart(quarterly, BarChartOptions(orientation="diagonal"))


def test_empty_dataset_is_rejected():
    with pytest.raises(ValueError):
        render_bar_chart(Dataset(data=()))


def test_bar_fraction_for_flat_range():
    assert bar_fraction(3, 3, 3) == 0.5
    assert bar_fraction(5, 0, 10) == 0.5


def test_partial_block_thresholds():
    assert partial_block(0.9) == glyphs.DARK_SHADE
    assert partial_block(0.6) == glyphs.MEDIUM_SHADE
    assert partial_block(0.3) == glyphs.LIGHT_SHADE
    assert partial_block(0.25) == ""
