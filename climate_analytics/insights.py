from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from climate_analytics.errors import UnknownOptionError

CATEGORIES = [
    ("all", "All Insights", "📊"),
    ("trend", "Trends", "📈"),
    ("correlation", "Correlations", "🔗"),
    ("prediction", "Predictions", "🔮"),
    ("anomaly", "Anomalies", "⚠️"),
    ("mitigation", "Mitigation", "🌱"),
    ("model", "Models", "🤖"),
]
CATEGORY_KEYS = [key for key, _, _ in CATEGORIES]

# card palette: accent text, background, border
PALETTE = {
    "red": ("#dc2626", "#fef2f2", "#fecaca"),
    "blue": ("#2563eb", "#eff6ff", "#bfdbfe"),
    "orange": ("#ea580c", "#fff7ed", "#fed7aa"),
    "yellow": ("#ca8a04", "#fefce8", "#fef08a"),
    "green": ("#16a34a", "#f0fdf4", "#bbf7d0"),
    "purple": ("#9333ea", "#faf5ff", "#e9d5ff"),
}

IMPACT_STYLES = {
    "critical": ("#dc2626", "#fee2e2"),
    "high": ("#ea580c", "#ffedd5"),
    "medium": ("#ca8a04", "#fef9c3"),
    "positive": ("#16a34a", "#dcfce7"),
    "technical": ("#9333ea", "#f3e8ff"),
}
HIGH_CONFIDENCE = 90


@dataclass(frozen=True)
class Insight:
    id: int
    type: str
    title: str
    description: str
    impact: str
    confidence: int
    icon: str
    color: str

    @property
    def palette(self):
        return PALETTE.get(self.color, ("#4b5563", "#f9fafb", "#e5e7eb"))


def impact_label(impact: str) -> str:
    return impact.capitalize() if impact in IMPACT_STYLES else "Unknown"


def impact_style(impact: str):
    """(text color, background) of the impact badge."""
    return IMPACT_STYLES.get(impact, ("#4b5563", "#f3f4f6"))


def category_label(key: str) -> str:
    for k, label, icon in CATEGORIES:
        if k == key:
            return f"{icon} {label}"
    raise UnknownOptionError("insight category", key, CATEGORY_KEYS)


def filter_insights(insights: Iterable[Insight], category: str) -> List[Insight]:
    if category not in CATEGORY_KEYS:
        raise UnknownOptionError("insight category", category, CATEGORY_KEYS)
    if category == "all":
        return list(insights)
    return [i for i in insights if i.type == category]


def find_insight(insights: Iterable[Insight], insight_id: Optional[int]) -> Optional[Insight]:
    if insight_id is None:
        return None
    return next((i for i in insights if i.id == insight_id), None)


def insights_summary(insights: List[Insight]) -> dict:
    n = len(insights)
    return {
        "total": n,
        "high_confidence": sum(1 for i in insights if i.confidence >= HIGH_CONFIDENCE),
        "critical_or_high": sum(1 for i in insights if i.impact in ("critical", "high")),
        "avg_confidence": round(sum(i.confidence for i in insights) / n) if n else 0,
    }
