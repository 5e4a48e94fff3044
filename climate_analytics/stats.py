"""Display aggregates over the generated frames.

Every reduction returns a formatted string and degrades to a zero string
when the frame is empty.
"""
from __future__ import annotations

import pandas as pd

from climate_analytics.errors import UnknownOptionError

TEMPERATURE_METRICS = {
    "temperature": ("Temperature", "°C"),
    "anomaly": ("Anomaly", "°C"),
    "co2": ("CO₂ Levels", "ppm"),
    "sea_level": ("Sea Level", "mm"),
}


def _zero(decimals: int) -> str:
    return f"{0:.{decimals}f}"


def _column(df: pd.DataFrame, column: str) -> pd.Series:
    if df is None or df.empty or column not in df.columns:
        return pd.Series(dtype=float)
    return pd.to_numeric(df[column], errors="coerce").dropna()


def mean_or_default(df: pd.DataFrame, column: str, decimals: int = 1) -> str:
    s = _column(df, column)
    return f"{s.mean():.{decimals}f}" if not s.empty else _zero(decimals)


def max_or_default(df: pd.DataFrame, column: str, decimals: int = 1) -> str:
    s = _column(df, column)
    return f"{s.max():.{decimals}f}" if not s.empty else _zero(decimals)


def sum_or_default(df: pd.DataFrame, column: str, decimals: int = 0) -> str:
    s = _column(df, column)
    return f"{s.sum():.{decimals}f}" if not s.empty else _zero(decimals)


def check_metric(metric: str) -> str:
    if metric not in TEMPERATURE_METRICS:
        raise UnknownOptionError("metric", metric, TEMPERATURE_METRICS)
    return metric


def temperature_summary(df: pd.DataFrame, metric: str) -> dict:
    """Current value, mean annual change and total change of one metric."""
    check_metric(metric)
    s = _column(df, metric)
    if s.empty:
        return {"current": "0.00", "annual_change": "0.000", "total_change": "0.00"}
    first, last = float(s.iloc[0]), float(s.iloc[-1])
    return {
        "current": f"{last:.2f}",
        "annual_change": f"{(last - first) / len(s):.3f}",
        "total_change": f"{last - first:.2f}",
    }


def precipitation_summary(df: pd.DataFrame) -> dict:
    return {
        "average": mean_or_default(df, "precipitation", 1),
        "peak": max_or_default(df, "precipitation", 1),
        "total": sum_or_default(df, "precipitation", 0),
    }
