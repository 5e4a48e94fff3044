from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from climate_analytics.correlation import CorrelationMatrix, correlation_strength
from climate_analytics.regions import MapView
from climate_analytics.stats import TEMPERATURE_METRICS, check_metric

BLUE = "#3b82f6"
GRID = "#e5e7eb"
AXIS = "#6b7280"


def _base_layout(fig: go.Figure, height: int = 320, hovermode: str = "x unified", **kwargs) -> go.Figure:
    fig.update_layout(
        height=height, margin=dict(l=20, r=30, t=20, b=20),
        paper_bgcolor="#ffffff", plot_bgcolor="#ffffff",
        hovermode=hovermode, showlegend=False, **kwargs
    )
    fig.update_xaxes(showgrid=False, linecolor=GRID, tickfont=dict(color=AXIS, size=12))
    fig.update_yaxes(gridcolor=GRID, griddash="dash", zeroline=False, tickfont=dict(color=AXIS, size=12))
    return fig


def temperature_chart(df: pd.DataFrame, metric: str) -> go.Figure:
    check_metric(metric)
    if df is None or df.empty:
        return go.Figure()
    label, unit = TEMPERATURE_METRICS[metric]
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["year"], y=df[metric], mode="lines+markers", name=label,
        line=dict(color=BLUE, width=3, shape="spline"),
        marker=dict(size=8, color=BLUE),
        fill="tozeroy", fillcolor="rgba(59,130,246,0.15)",
        hovertemplate=f"Year: %{{x}}<br>{label}: %{{y:.2f}} {unit}<extra></extra>",
    ))
    _base_layout(fig, xaxis_title="Year", yaxis_title=f"{label} ({unit})")
    # autorange on a tozeroy fill squashes curves that sit far from zero
    if metric in ("temperature", "co2"):
        lo, hi = float(df[metric].min()), float(df[metric].max())
        pad = max((hi - lo) * 0.15, 0.1)
        fig.update_yaxes(range=[lo - pad, hi + pad])
    return fig


def precipitation_bar_chart(df: pd.DataFrame) -> go.Figure:
    if df is None or df.empty:
        return go.Figure()
    fig = go.Figure(go.Bar(
        x=df["month"], y=df["precipitation"], marker_color=BLUE,
        customdata=np.stack([df["temperature"], df["humidity"]], axis=-1),
        hovertemplate=(
            "<b>Month: %{x}</b><br>"
            "Precipitation: %{y} mm<br>"
            "Temperature: %{customdata[0]:.1f} °C<br>"
            "Humidity: %{customdata[1]:.1f}%<extra></extra>"
        ),
    ))
    return _base_layout(fig, xaxis_title="Month", yaxis_title="mm", hovermode="closest")


def regional_pie_chart(df: pd.DataFrame) -> go.Figure:
    if df is None or df.empty:
        return go.Figure()
    fig = go.Figure(go.Pie(
        labels=df["name"], values=df["value"], marker=dict(colors=df["color"].tolist()),
        textinfo="label+percent", sort=False,
        hovertemplate="<b>%{label}</b><br>Coverage: %{value}%<extra></extra>",
    ))
    fig.update_layout(height=320, margin=dict(l=20, r=20, t=20, b=20), showlegend=False)
    return fig


def correlation_heatmap(matrix: CorrelationMatrix, selected: Optional[str] = None) -> go.Figure:
    frame = matrix.to_frame()
    strengths = [[correlation_strength(v) for v in row] for row in frame.values]
    fig = go.Figure(go.Heatmap(
        z=frame.values, x=matrix.variables, y=matrix.variables,
        zmin=-1, zmax=1, colorscale="RdBu", reversescale=True,
        text=np.round(frame.values, 1), texttemplate="%{text}",
        customdata=strengths,
        hovertemplate="%{y} × %{x}<br>r = %{z:.2f} (%{customdata})<extra></extra>",
        colorbar=dict(title="r"),
    ))
    fig.update_layout(height=420, margin=dict(l=10, r=10, t=10, b=10))
    fig.update_yaxes(autorange="reversed")
    if selected in matrix.variables:
        i = matrix.variables.index(selected)
        fig.add_shape(type="rect", x0=-0.5, x1=len(matrix.variables) - 0.5, y0=i - 0.5, y1=i + 0.5,
                      line=dict(color="#9333ea", width=2))
    return fig


def prediction_chart(df: pd.DataFrame, current_year: int) -> go.Figure:
    if df is None or df.empty:
        return go.Figure()
    scenario = df["scenario"].fillna("historical")
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["year"], y=df["temperature"], mode="lines+markers", name="Temperature",
        line=dict(color=BLUE, width=3), marker=dict(size=7, color=BLUE),
        customdata=np.stack([df["confidence"], scenario], axis=-1),
        hovertemplate=(
            "Year: %{x}<br>Temperature: %{y:.2f} °C<br>"
            "Confidence: %{customdata[0]}%<br>Scenario: %{customdata[1]}<extra></extra>"
        ),
    ))
    fig.add_vline(x=current_year, line_dash="dot", line_color=AXIS)
    return _base_layout(fig, xaxis_title="Year", yaxis_title="°C", hovermode="closest")


def world_map(regions: pd.DataFrame, view: MapView, tile_url: str, selected: Optional[str] = None) -> go.Figure:
    fig = go.Figure()
    if regions is not None and not regions.empty:
        # outline ring (risk) under the fill (temperature); map markers have no stroke
        fig.add_trace(go.Scattermap(
            lat=regions["lat"], lon=regions["lon"], mode="markers",
            marker=dict(size=(regions["radius"] * 2 + 6).tolist(), color=regions["outline"].tolist()),
            hoverinfo="skip", showlegend=False,
        ))
        fig.add_trace(go.Scattermap(
            lat=regions["lat"], lon=regions["lon"], mode="markers",
            marker=dict(size=(regions["radius"] * 2).tolist(), color=regions["fill"].tolist(), opacity=0.85),
            text=regions["name"],
            customdata=np.stack([regions["temperature"], regions["co2"], regions["risk"]], axis=-1),
            hovertemplate=(
                "<b>%{text}</b><br>Temperature: %{customdata[0]} °C<br>"
                "CO₂: %{customdata[1]} ppm<br>Risk Level: %{customdata[2]}<extra></extra>"
            ),
            showlegend=False,
        ))
        if selected:
            sel = regions[regions["name"] == selected]
            if not sel.empty:
                fig.add_trace(go.Scattermap(
                    lat=sel["lat"], lon=sel["lon"], mode="text", text=sel["name"],
                    textposition="top center", textfont=dict(size=14, color="#111827"),
                    hoverinfo="skip", showlegend=False,
                ))
    fig.update_layout(
        height=420, margin=dict(l=0, r=0, t=0, b=0),
        map=dict(
            style="white-bg",
            center=dict(lat=view.center[0], lon=view.center[1]),
            zoom=view.zoom,
            layers=[{"below": "traces", "sourcetype": "raster", "source": [tile_url]}],
        ),
    )
    return fig
