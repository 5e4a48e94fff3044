from __future__ import annotations

from typing import Dict, List, Tuple

import pandas as pd

# (threshold on |r|, label, color)
STRENGTH_LADDER: List[Tuple[float, str, str]] = [
    (0.8, "Very Strong", "#ef4444"),
    (0.6, "Strong", "#f97316"),
    (0.4, "Moderate", "#eab308"),
    (0.2, "Weak", "#22c55e"),
]
VERY_WEAK = ("Very Weak", "#d1d5db")


def _bucket(value: float) -> Tuple[str, str]:
    r = abs(value)
    for threshold, label, color in STRENGTH_LADDER:
        if r >= threshold:
            return label, color
    return VERY_WEAK


def correlation_strength(value: float) -> str:
    return _bucket(value)[0]


def correlation_color(value: float) -> str:
    return _bucket(value)[1]


def legend_entries() -> List[Tuple[str, str]]:
    out = [(f"{label} (≥{threshold})", color) for threshold, label, color in STRENGTH_LADDER]
    out.append((f"{VERY_WEAK[0]} (<{STRENGTH_LADDER[-1][0]})", VERY_WEAK[1]))
    return out


class CorrelationMatrix:
    """Ordered variables plus a sparse upper-triangular coefficient map.

    Only one orientation of each pair is stored; lookups mirror the pair so
    the matrix reads as symmetric with a unit diagonal.
    """

    def __init__(self, variables: List[str], correlations: Dict[str, Dict[str, float]]):
        self.variables = list(variables)
        self.correlations = {k: dict(v) for k, v in correlations.items()}

    def lookup(self, a: str, b: str) -> float:
        if a == b:
            return 1.0
        value = self.correlations.get(a, {}).get(b)
        if value is None:
            value = self.correlations.get(b, {}).get(a)
        return float(value) if value is not None else 0.0

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [[self.lookup(r, c) for c in self.variables] for r in self.variables],
            index=self.variables,
            columns=self.variables,
        )

    def related(self, variable: str) -> List[Tuple[str, float]]:
        return [(other, self.lookup(variable, other)) for other in self.variables if other != variable]

    def strongest_pairs(self, n: int = 3) -> List[Tuple[str, str, float]]:
        pairs = []
        for i, a in enumerate(self.variables):
            for b in self.variables[i + 1:]:
                pairs.append((a, b, self.lookup(a, b)))
        pairs.sort(key=lambda p: abs(p[2]), reverse=True)
        return pairs[:n]
