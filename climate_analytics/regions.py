from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

import pandas as pd

DEFAULT_CENTER = (20.0, 0.0)
DEFAULT_ZOOM = 2
FOCUS_ZOOM = 4

RISK_COLORS = {
    "Low": "#10b981",
    "Medium": "#f59e0b",
    "High": "#ef4444",
    "Critical": "#dc2626",
}
# (background, text) for the detail-card badge
RISK_BADGES = {
    "Low": ("#dcfce7", "#166534"),
    "Medium": ("#fef9c3", "#854d0e"),
    "High": ("#ffedd5", "#9a3412"),
}
CRITICAL_BADGE = ("#fee2e2", "#991b1b")


@dataclass(frozen=True)
class RegionSample:
    name: str
    lat: float
    lon: float
    temperature: float
    co2: float
    risk: str


def risk_color(risk: str) -> str:
    return RISK_COLORS.get(risk, "#6b7280")


def risk_badge(risk: str):
    return RISK_BADGES.get(risk, CRITICAL_BADGE)


def temperature_color(temp: float) -> str:
    if temp < 0:
        return "#3b82f6"
    if temp < 10:
        return "#10b981"
    if temp < 20:
        return "#f59e0b"
    if temp < 30:
        return "#f97316"
    return "#ef4444"


def marker_radius(temp: float) -> float:
    return max(8.0, min(20.0, abs(temp) * 0.8))


def regions_frame(regions: Iterable[RegionSample]) -> pd.DataFrame:
    rows = []
    for r in regions:
        rows.append({
            "name": r.name, "lat": r.lat, "lon": r.lon,
            "temperature": r.temperature, "co2": r.co2, "risk": r.risk,
            "fill": temperature_color(r.temperature),
            "outline": risk_color(r.risk),
            "radius": marker_radius(r.temperature),
        })
    return pd.DataFrame(rows, columns=["name", "lat", "lon", "temperature", "co2", "risk",
                                       "fill", "outline", "radius"])


def find_region(regions: Iterable[RegionSample], name: Optional[str]) -> Optional[RegionSample]:
    if not name:
        return None
    return next((r for r in regions if r.name == name), None)


@dataclass(frozen=True)
class MapView:
    center: tuple = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM

    def focus(self, region: RegionSample) -> "MapView":
        return replace(self, center=(region.lat, region.lon), zoom=FOCUS_ZOOM)


def view_for(region: Optional[RegionSample]) -> MapView:
    return MapView().focus(region) if region is not None else MapView()

