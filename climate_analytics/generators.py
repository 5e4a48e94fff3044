"""Synthetic climate datasets.

Every generator fabricates plausible-looking numbers: a deterministic
trend/seasonal curve plus uniform jitter. Nothing is fetched or stored; the
panels call these once when they first render and keep the result in
session state.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from climate_analytics.correlation import CorrelationMatrix
from climate_analytics.insights import Insight
from climate_analytics.regions import RegionSample

logger = logging.getLogger(__name__)

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

TEMPERATURE_START_YEAR = 2004
TEMPERATURE_YEARS = 20
TEMPERATURE_BASELINE = 14.5
TEMPERATURE_TREND = 0.02
TEMPERATURE_AMPLITUDE = 0.3
TEMPERATURE_JITTER = 0.2

PRECIP_BASE = 50.0
PRECIP_AMPLITUDE = 20.0
PRECIP_JITTER = 15.0

HISTORICAL_START_YEAR = 2014
PROJECTION_START_YEAR = 2024


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def seasonal_phase(month_index) -> np.ndarray:
    """sin((i - 2) * pi / 6): peaks in May, troughs in November."""
    return np.sin((np.asarray(month_index, dtype=float) - 2) * np.pi / 6)


# ---------- Temperature (annual) ----------
def generate_temperature_series(rng: Optional[np.random.Generator] = None) -> pd.DataFrame:
    rng = _rng(rng)
    years = np.arange(TEMPERATURE_START_YEAR, TEMPERATURE_START_YEAR + TEMPERATURE_YEARS)
    k = years - TEMPERATURE_START_YEAR
    base = TEMPERATURE_BASELINE + k * TEMPERATURE_TREND
    seasonal = np.sin(k * 0.5) * TEMPERATURE_AMPLITUDE
    jitter = rng.uniform(-TEMPERATURE_JITTER, TEMPERATURE_JITTER, size=len(years))
    df = pd.DataFrame({
        "year": years,
        "temperature": np.round(base + seasonal + jitter, 2),
        "anomaly": np.round(base - TEMPERATURE_BASELINE + seasonal + jitter, 2),
        "co2": 375 + k * 2.1 + rng.uniform(0, 5, size=len(years)),
        "sea_level": k * 3.2 + rng.uniform(0, 2, size=len(years)),
    })
    logger.debug("generated %d temperature records", len(df))
    return df


# ---------- Precipitation (monthly) ----------
def generate_precipitation_series(rng: Optional[np.random.Generator] = None) -> pd.DataFrame:
    rng = _rng(rng)
    idx = np.arange(len(MONTHS))
    s = seasonal_phase(idx)
    precipitation = np.maximum(0, PRECIP_BASE + s * PRECIP_AMPLITUDE
                               + rng.uniform(-PRECIP_JITTER, PRECIP_JITTER, size=len(idx)))
    return pd.DataFrame({
        "month": MONTHS,
        "precipitation": np.round(precipitation, 1),
        "temperature": 20 + s * 10 + rng.uniform(-2.5, 2.5, size=len(idx)),
        "humidity": 60 + s * 20 + rng.uniform(-5, 5, size=len(idx)),
    })


def generate_regional_distribution() -> pd.DataFrame:
    return pd.DataFrame([
        {"name": "Tropical", "value": 35, "color": "#3b82f6"},
        {"name": "Temperate", "value": 28, "color": "#10b981"},
        {"name": "Arid", "value": 20, "color": "#f59e0b"},
        {"name": "Polar", "value": 17, "color": "#8b5cf6"},
    ])


# ---------- Predictions ----------
def projection_scenario(i: int) -> str:
    if i < 5:
        return "optimistic"
    if i < 10:
        return "realistic"
    return "pessimistic"


def generate_prediction_series(rng: Optional[np.random.Generator] = None) -> pd.DataFrame:
    rng = _rng(rng)
    rows = []
    for i in range(10):
        rows.append({
            "year": HISTORICAL_START_YEAR + i,
            "temperature": 14.2 + i * 0.15 + rng.uniform(-0.15, 0.15),
            "confidence": 95,
            "scenario": None,
        })
    for i in range(15):
        rows.append({
            "year": PROJECTION_START_YEAR + i,
            "temperature": 15.5 + i * 0.18 + rng.uniform(-0.2, 0.2),
            "confidence": max(60, 95 - i * 2),
            "scenario": projection_scenario(i),
        })
    return pd.DataFrame(rows, columns=["year", "temperature", "confidence", "scenario"])


# ---------- Static catalogues ----------
def generate_correlation_matrix() -> CorrelationMatrix:
    variables = ["Temperature", "CO₂", "Sea Level", "Precipitation", "Humidity", "Wind Speed"]
    correlations = {
        "Temperature": {"CO₂": 0.85, "Sea Level": 0.72, "Precipitation": -0.15, "Humidity": 0.23, "Wind Speed": -0.31},
        "CO₂": {"Sea Level": 0.68, "Precipitation": -0.08, "Humidity": 0.18, "Wind Speed": -0.25},
        "Sea Level": {"Precipitation": 0.12, "Humidity": 0.15, "Wind Speed": -0.18},
        "Precipitation": {"Humidity": 0.45, "Wind Speed": 0.38},
        "Humidity": {"Wind Speed": 0.22},
    }
    return CorrelationMatrix(variables, correlations)


def generate_region_samples() -> List[RegionSample]:
    return [
        RegionSample("North America", 45.0, -100.0, 8.5, 415, "Medium"),
        RegionSample("Europe", 54.0, 15.0, 9.2, 410, "Low"),
        RegionSample("Asia", 35.0, 100.0, 12.8, 425, "High"),
        RegionSample("Africa", 0.0, 20.0, 25.3, 400, "High"),
        RegionSample("South America", -15.0, -60.0, 22.1, 405, "Medium"),
        RegionSample("Australia", -25.0, 135.0, 21.5, 420, "High"),
        RegionSample("Antarctica", -80.0, 0.0, -50.0, 380, "Critical"),
        RegionSample("Arctic", 80.0, 0.0, -15.0, 390, "Critical"),
    ]


def generate_insights() -> List[Insight]:
    return [
        Insight(1, "trend", "Accelerating Temperature Rise",
                "Global temperatures are rising at an unprecedented rate of 0.18°C per decade, "
                "significantly faster than historical averages.",
                "high", 95, "📈", "red"),
        Insight(2, "correlation", "CO₂-Temperature Correlation",
                "Strong positive correlation (r=0.85) between atmospheric CO₂ levels and global "
                "temperature anomalies.",
                "high", 98, "📊", "blue"),
        Insight(3, "prediction", "Sea Level Acceleration",
                "Sea level rise is accelerating, with current rate of 3.3mm/year projected to "
                "increase to 5.2mm/year by 2030.",
                "critical", 92, "📈", "orange"),
        Insight(4, "anomaly", "Extreme Weather Events",
                "Frequency of extreme weather events has increased by 40% over the past two "
                "decades, correlating with temperature rise.",
                "high", 88, "⚠️", "yellow"),
        Insight(5, "mitigation", "Renewable Energy Growth",
                "Global renewable energy capacity has grown by 15% annually, showing positive "
                "momentum in climate mitigation efforts.",
                "positive", 90, "⚡", "green"),
        Insight(6, "model", "ML Model Accuracy",
                "Machine learning models achieve 94% accuracy in predicting temperature trends "
                "using multi-variable analysis.",
                "technical", 94, "🧠", "purple"),
    ]


def headline_stats() -> List[dict]:
    return [
        {"title": "Global Temperature", "value": "1.1°C", "change": "+0.2°C", "trend": "up",
         "icon": "🌡️", "color": "#ef4444", "description": "Above pre-industrial levels"},
        {"title": "Sea Level Rise", "value": "3.3mm/year", "change": "+0.1mm", "trend": "up",
         "icon": "💧", "color": "#3b82f6", "description": "Global average"},
        {"title": "CO₂ Concentration", "value": "417 ppm", "change": "+2.5 ppm", "trend": "up",
         "icon": "🌬️", "color": "#f97316", "description": "Atmospheric levels"},
        {"title": "Climate Risk", "value": "High", "change": "Stable", "trend": "neutral",
         "icon": "⚠️", "color": "#eab308", "description": "Global assessment"},
    ]
