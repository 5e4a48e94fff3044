from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

import pandas as pd

from climate_analytics.errors import UnknownOptionError

PROJECTION_START_YEAR = 2024
TIMEFRAMES = [5, 10, 20, 30]
DEFAULT_TIMEFRAME = 10
DEFAULT_SCENARIO = "realistic"


@dataclass(frozen=True)
class Scenario:
    key: str
    name: str
    description: str
    icon: str
    color: str
    background: str
    border: str


SCENARIOS = {
    "optimistic": Scenario("optimistic", "Optimistic", "Strong climate action, rapid decarbonization",
                           "🌱", "#16a34a", "#f0fdf4", "#bbf7d0"),
    "realistic": Scenario("realistic", "Realistic", "Current policies continue, moderate action",
                          "📊", "#2563eb", "#eff6ff", "#bfdbfe"),
    "pessimistic": Scenario("pessimistic", "Pessimistic", "Limited action, business as usual",
                            "⚠️", "#dc2626", "#fef2f2", "#fecaca"),
}

# which projected scenario labels stay visible for each selection
_VISIBLE = {
    "optimistic": {"optimistic", "realistic"},
    "realistic": {"realistic"},
    "pessimistic": {"pessimistic", "realistic"},
}


def get_scenario(key: str) -> Scenario:
    try:
        return SCENARIOS[key]
    except KeyError:
        raise UnknownOptionError("scenario", key, SCENARIOS) from None


def filter_timeframe(df: pd.DataFrame, years: int) -> pd.DataFrame:
    if years not in TIMEFRAMES:
        raise UnknownOptionError("timeframe", years, TIMEFRAMES)
    return df[df["year"] >= PROJECTION_START_YEAR - years].reset_index(drop=True)


def filter_scenario(df: pd.DataFrame, scenario: str, current_year: Optional[int] = None) -> pd.DataFrame:
    """Keep everything before the current year, then the scenario's projections."""
    get_scenario(scenario)
    if current_year is None:
        current_year = date.today().year
    past = df["year"] < current_year
    visible = df["scenario"].isin(_VISIBLE[scenario])
    return df[past | visible].reset_index(drop=True)


def risk_level(rise: float) -> str:
    if rise > 2:
        return "High"
    if rise > 1:
        return "Medium"
    return "Low"


def projection_summary(df: pd.DataFrame) -> dict:
    if df is None or df.empty:
        current, rise = 0.0, 0.0
    else:
        current = float(df["temperature"].iloc[-1])
        rise = current - float(df["temperature"].iloc[0])
    return {
        "projected": f"{current:.1f}",
        "rise": f"{rise:+.1f}",
        "risk": risk_level(rise),
    }
