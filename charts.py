from __future__ import annotations

from typing import Optional

import plotly.graph_objects as go

from constants import (
    DEFAULT_CHART_HEIGHT,
    DEPRESSION_REGION_STYLES,
    DEPRESSION_REGIONS,
    DEPRESSION_X_RANGE,
    DEPRESSION_Y_RANGE,
    HUMIDITY_LINE_LEVELS,
    HUMIDITY_LINE_SAMPLES,
    HUMIDITY_REGION_STYLES,
    HUMIDITY_REGIONS,
    HUMIDITY_X_RANGE,
    HUMIDITY_Y_RANGE,
)
from icing import Unit, from_celsius, to_celsius
from utils.humidity import dew_point_for_humidity

READING_NAME = "Your reading"
INVALID_READING_NAME = "Dew point above temperature"


def _add_regions(fig: go.Figure, regions: dict, styles: dict) -> None:
    for key, points in regions.items():
        label, fill, outline = styles[key]
        xs = [p[0] for p in points] + [points[0][0]]
        ys = [p[1] for p in points] + [points[0][1]]
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                name=label,
                fill="toself",
                fillcolor=fill,
                line=dict(color=outline, width=1, shape="spline", smoothing=0.6),
                hoverinfo="name",
            )
        )


def _add_reading(fig: go.Figure, x: float, y: float, *, valid: bool = True) -> None:
    fig.add_trace(
        go.Scatter(
            x=[x],
            y=[y],
            mode="markers",
            name=READING_NAME if valid else INVALID_READING_NAME,
            marker=dict(
                size=12,
                color="red" if valid else "gray",
                line=dict(color="darkred" if valid else "darkgray", width=2),
            ),
            opacity=1.0 if valid else 0.5,
            hovertemplate="%{x:.1f}, %{y:.1f}<extra></extra>",
        )
    )


def _finish_layout(fig: go.Figure, *, height: int, x_title: str, y_title: str, x_range, y_range) -> None:
    fig.update_layout(
        template="simple_white",
        height=height,
        margin=dict(l=60, r=20, t=20, b=60),
        legend=dict(orientation="h", yanchor="top", y=-0.2, xanchor="left", x=0),
        xaxis_title=x_title,
        yaxis_title=y_title,
    )
    fig.update_xaxes(range=list(x_range), showgrid=True)
    fig.update_yaxes(range=list(y_range), showgrid=True)


def build_depression_figure(
    temperature_c: Optional[float],
    dew_point_c: Optional[float],
    unit: Unit = Unit.CELSIUS,
    *,
    height: int = DEFAULT_CHART_HEIGHT,
) -> go.Figure:
    unit = Unit(unit)
    fig = go.Figure()
    _add_regions(fig, DEPRESSION_REGIONS[unit.value], DEPRESSION_REGION_STYLES)

    if temperature_c is not None and dew_point_c is not None:
        # Depression is taken between display values so the point sits on the
        # chart's own axes in either unit.
        display_temp = from_celsius(temperature_c, unit)
        display_dew = from_celsius(dew_point_c, unit)
        _add_reading(fig, display_temp, display_temp - display_dew)

    _finish_layout(
        fig,
        height=height,
        x_title=f"Temperature ({unit.symbol})",
        y_title=f"Dew Point Depression ({unit.symbol})",
        x_range=DEPRESSION_X_RANGE[unit.value],
        y_range=DEPRESSION_Y_RANGE[unit.value],
    )
    return fig


def humidity_line(rh_percent: float, unit: Unit = Unit.CELSIUS) -> tuple[list[float], list[float]]:
    """Sampled (temperature, dew point) curve of constant relative humidity in display units."""
    unit = Unit(unit)
    x_lo, x_hi = HUMIDITY_X_RANGE[unit.value]
    y_hi = HUMIDITY_Y_RANGE[unit.value][1]
    step = (x_hi - x_lo) / HUMIDITY_LINE_SAMPLES
    xs, ys = [], []
    for i in range(HUMIDITY_LINE_SAMPLES + 1):
        x = x_lo + i * step
        dew_c = dew_point_for_humidity(to_celsius(x, unit), rh_percent)
        xs.append(x)
        ys.append(min(from_celsius(dew_c, unit), x, y_hi))
    return xs, ys


def build_humidity_figure(
    temperature_c: Optional[float],
    dew_point_c: Optional[float],
    unit: Unit = Unit.CELSIUS,
    *,
    height: int = DEFAULT_CHART_HEIGHT,
) -> go.Figure:
    unit = Unit(unit)
    x_lo, x_hi = HUMIDITY_X_RANGE[unit.value]
    y_lo, y_hi = HUMIDITY_Y_RANGE[unit.value]
    fig = go.Figure()

    # Above the 100% line the dew point would exceed the air temperature
    fig.add_trace(
        go.Scatter(
            x=[x_lo, min(x_hi, y_hi), x_lo],
            y=[x_lo, min(x_hi, y_hi), y_hi],
            mode="lines",
            name="Above 100% humidity",
            fill="toself",
            fillcolor="rgba(200,200,200,0.3)",
            line=dict(color="rgba(150,150,150,0.5)", width=1),
            hoverinfo="skip",
            showlegend=False,
        )
    )

    _add_regions(fig, HUMIDITY_REGIONS[unit.value], HUMIDITY_REGION_STYLES)

    for level in HUMIDITY_LINE_LEVELS:
        xs, ys = humidity_line(level, unit)
        fig.add_trace(
            go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                name=f"{level}% RH",
                line=dict(
                    color="rgba(128,128,128,0.6)",
                    width=1,
                    dash="solid" if level == 100 else "dash",
                ),
                hoverinfo="name",
                showlegend=False,
            )
        )
        mid = len(xs) // 2
        fig.add_annotation(
            x=xs[mid],
            y=ys[mid],
            text=f"<b>{level}%</b>",
            showarrow=False,
            xshift=15,
            yshift=5,
            font=dict(size=10, color="rgba(128,128,128,0.8)"),
        )

    if temperature_c is not None and dew_point_c is not None:
        display_temp = from_celsius(temperature_c, unit)
        if dew_point_c <= temperature_c:
            _add_reading(fig, display_temp, from_celsius(dew_point_c, unit))
        else:
            # Impossible reading: park it on the 100% line, greyed out
            _add_reading(fig, display_temp, display_temp, valid=False)

    _finish_layout(
        fig,
        height=height,
        x_title=f"Ambient Temperature ({unit.symbol})",
        y_title=f"Dew Point ({unit.symbol})",
        x_range=(x_lo, x_hi),
        y_range=(y_lo, y_hi),
    )
    return fig
