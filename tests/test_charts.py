import plotly.graph_objects as go
import pytest

from charts import (
    INVALID_READING_NAME,
    READING_NAME,
    build_depression_figure,
    build_humidity_figure,
    humidity_line,
)
from constants import DEPRESSION_REGION_STYLES, HUMIDITY_REGION_STYLES
from icing import Unit


def _trace(fig, name):
    matches = [t for t in fig.data if t.name == name]
    assert matches, f"no trace named {name!r}"
    return matches[0]


def test_depression_figure_basic_properties():
    fig = build_depression_figure(10.0, 5.0, Unit.CELSIUS, height=400)
    assert isinstance(fig, go.Figure)
    assert fig.layout.height == 400

    names = [t.name for t in fig.data]
    for label, _, _ in DEPRESSION_REGION_STYLES.values():
        assert label in names

    assert fig.layout.xaxis.title.text == "Temperature (°C)"
    assert fig.layout.yaxis.title.text == "Dew Point Depression (°C)"
    assert tuple(fig.layout.xaxis.range) == (0, 50)
    assert tuple(fig.layout.yaxis.range) == (-10, 30)

    point = _trace(fig, READING_NAME)
    assert point.x[0] == pytest.approx(10.0)
    assert point.y[0] == pytest.approx(5.0)


def test_depression_figure_fahrenheit_axes_and_point():
    fig = build_depression_figure(10.0, 5.0, Unit.FAHRENHEIT)
    assert fig.layout.xaxis.title.text == "Temperature (°F)"
    assert tuple(fig.layout.xaxis.range) == (32, 110)
    point = _trace(fig, READING_NAME)
    assert point.x[0] == pytest.approx(50.0)
    assert point.y[0] == pytest.approx(9.0)


def test_depression_figure_without_reading_has_only_regions():
    fig = build_depression_figure(None, 5.0)
    assert READING_NAME not in [t.name for t in fig.data]
    assert len(fig.data) == len(DEPRESSION_REGION_STYLES)


def test_humidity_figure_regions_lines_and_labels():
    fig = build_humidity_figure(15.0, 10.0, Unit.CELSIUS)
    names = [t.name for t in fig.data]
    for label, _, _ in HUMIDITY_REGION_STYLES.values():
        assert label in names
    for level in (20, 40, 60, 80, 100):
        assert f"{level}% RH" in names
    ann_texts = [a.text for a in fig.layout.annotations]
    assert "<b>100%</b>" in ann_texts

    assert _trace(fig, "100% RH").line.dash == "solid"
    assert _trace(fig, "20% RH").line.dash == "dash"
    assert fig.layout.yaxis.title.text == "Dew Point (°C)"
    assert tuple(fig.layout.yaxis.range) == (0, 32)

    point = _trace(fig, READING_NAME)
    assert point.y[0] == pytest.approx(10.0)


def test_humidity_figure_parks_impossible_reading_on_saturation_line():
    fig = build_humidity_figure(20.0, 25.0, Unit.CELSIUS)
    names = [t.name for t in fig.data]
    assert READING_NAME not in names
    point = _trace(fig, INVALID_READING_NAME)
    assert point.x[0] == pytest.approx(20.0)
    assert point.y[0] == pytest.approx(20.0)
    assert point.marker.color == "gray"


def test_saturation_line_follows_temperature_until_axis_top():
    xs, ys = humidity_line(100, Unit.CELSIUS)
    assert xs[0] == pytest.approx(0.0)
    assert xs[-1] == pytest.approx(54.0)
    for x, y in zip(xs, ys):
        assert y == pytest.approx(min(x, 32.0), abs=1e-6)


def test_lower_humidity_lines_sit_below_higher_ones():
    _, ys_40 = humidity_line(40, Unit.FAHRENHEIT)
    _, ys_80 = humidity_line(80, Unit.FAHRENHEIT)
    assert all(a <= b for a, b in zip(ys_40, ys_80))
