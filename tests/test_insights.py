"""Tests for insight filtering and summaries."""

import pytest

from climate_analytics.errors import UnknownOptionError
from climate_analytics.insights import (
    CATEGORY_KEYS,
    category_label,
    filter_insights,
    find_insight,
    impact_label,
    impact_style,
    insights_summary,
)


class TestFilter:
    def test_all(self, insights):
        assert len(filter_insights(insights, "all")) == 6

    @pytest.mark.parametrize("category", CATEGORY_KEYS[1:])
    def test_each_category_has_one(self, insights, category):
        out = filter_insights(insights, category)
        assert [i.type for i in out] == [category]

    def test_unknown_category(self, insights):
        with pytest.raises(UnknownOptionError):
            filter_insights(insights, "gossip")

    def test_find(self, insights):
        assert find_insight(insights, 3).title == "Sea Level Acceleration"
        assert find_insight(insights, 42) is None
        assert find_insight(insights, None) is None


class TestLabels:
    @pytest.mark.parametrize("impact,label", [("critical", "Critical"), ("high", "High"),
                                              ("medium", "Medium"), ("positive", "Positive"),
                                              ("technical", "Technical"), ("whatever", "Unknown")])
    def test_impact_label(self, impact, label):
        assert impact_label(impact) == label

    def test_unknown_impact_style_is_grey(self):
        assert impact_style("whatever") == ("#4b5563", "#f3f4f6")

    def test_category_label(self):
        assert category_label("all") == "📊 All Insights"
        with pytest.raises(UnknownOptionError):
            category_label("nope")


class TestSummary:
    def test_summary(self, insights):
        assert insights_summary(insights) == {
            "total": 6,
            "high_confidence": 5,
            "critical_or_high": 4,
            "avg_confidence": 93,
        }

    def test_empty(self):
        assert insights_summary([]) == {
            "total": 0, "high_confidence": 0, "critical_or_high": 0, "avg_confidence": 0,
        }
