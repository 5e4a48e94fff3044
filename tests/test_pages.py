"""Headless page runs through streamlit's AppTest."""

import pytest

from climate_analytics import panels

PAGES = {
    "Home_Page.py": 6,
    "pages/1_Analysis.py": 3,
    "pages/2_Predictions.py": 2,
    "pages/3_Insights.py": 1,
}

ADMIN_TITLE = "Admin: Session analytics"


def _events(at, name):
    return [e for e in at.session_state["analytics"] if e["event"] == name]


class FakeHeatmapEvents:
    """Stands in for the plotly_events component. A delivered click is
    returned on every rerun until the component is mounted under a new key."""

    def __init__(self):
        self.pending = None
        self.values = {}
        self.keys = []

    def click(self, x, y):
        self.pending = [{"x": x, "y": y, "curveNumber": 0, "pointNumber": [0, 0]}]

    def __call__(self, fig, key=None, **kwargs):
        self.keys.append(key)
        if self.pending is not None:
            self.values[key] = self.pending
            self.pending = None
        return self.values.get(key, [])


class TestPagesRender:
    @pytest.mark.parametrize("script", list(PAGES))
    def test_runs_without_exception(self, app, script):
        at = app(script).run()
        assert not at.exception
        assert at.session_state["settings"].loading_delay == 0

    @pytest.mark.parametrize("script,downloads", list(PAGES.items()))
    def test_every_chart_panel_offers_csv(self, app, script, downloads):
        at = app(script).run()
        assert len(at.get("download_button")) == downloads

    def test_home_mounts_every_dataset(self, app):
        at = app("Home_Page.py").run()
        mounted = {e["dataset"] for e in _events(at, "data_generated")}
        assert mounted == set(panels.DATASETS)
        assert len(_events(at, "loading_ready")) == 1


class TestRefresh:
    def test_regenerates_every_dataset(self, app):
        at = app("Home_Page.py").run()
        at.button(key="header_refresh").click().run()
        assert not at.exception
        refreshed = _events(at, "data_refreshed")
        assert len(refreshed) == 1
        assert set(refreshed[0]["datasets"].split(",")) == set(panels.DATASETS)
        generated = [e["dataset"] for e in _events(at, "data_generated")]
        for name in panels.DATASETS:
            assert generated.count(name) == 2, name

    def test_plain_rerun_keeps_datasets(self, app):
        at = app("pages/1_Analysis.py").run()
        before = at.session_state["data_temperature"]
        at.run()
        assert at.session_state["data_temperature"].equals(before)
        assert _events(at, "data_refreshed") == []
        assert [e["dataset"] for e in _events(at, "data_generated")].count("temperature") == 1


class TestConfigError:
    def test_invalid_delay_stops_page(self, app, monkeypatch):
        monkeypatch.setenv("LOADING_DELAY_SECONDS", "soon")
        at = app("Home_Page.py").run()
        assert not at.exception
        assert len(at.error) == 1
        assert "LOADING_DELAY_SECONDS" in at.error[0].value
        assert len(at.get("download_button")) == 0
        assert "settings" not in at.session_state


class TestAdminAnalytics:
    def _has_admin_panel(self, at):
        return any(s.value == ADMIN_TITLE for s in at.subheader)

    def test_hidden_by_default(self, app):
        at = app("Home_Page.py").run()
        assert not self._has_admin_panel(at)

    def test_shown_when_configured(self, app, monkeypatch):
        monkeypatch.setenv("IS_ADMIN", "true")
        at = app("Home_Page.py").run()
        assert self._has_admin_panel(at)
        # analytics export on top of the six panel downloads
        assert len(at.get("download_button")) == 7

    def test_shown_with_query_param(self, app):
        at = app("pages/3_Insights.py")
        at.query_params["admin"] = "1"
        at.run()
        assert self._has_admin_panel(at)


class TestInsightsPanel:
    def test_details_then_filter_clears_selection(self, app):
        at = app("pages/3_Insights.py").run()
        at.button(key="insight_btn_1").click().run()
        assert at.session_state["opt_insight_sel"] == 1
        assert _events(at, "insight_select")[-1]["insight"] == 1

        at.radio(key="opt_insight_filter").set_value("anomaly").run()
        assert at.session_state["opt_insight_sel"] is None
        assert _events(at, "insight_filter")[-1]["category"] == "anomaly"

    def test_close_button(self, app):
        at = app("pages/3_Insights.py").run()
        at.button(key="insight_btn_2").click().run()
        at.button(key="insight_close").click().run()
        assert at.session_state["opt_insight_sel"] is None


class TestCorrelationPanel:
    @pytest.fixture
    def heatmap(self, monkeypatch):
        fake = FakeHeatmapEvents()
        monkeypatch.setattr(panels, "plotly_events", fake)
        return fake

    def test_heatmap_click_selects_row(self, app, heatmap):
        at = app("pages/1_Analysis.py").run()
        heatmap.click("Temperature", "Humidity")
        at.run()
        assert not at.exception
        assert at.session_state["opt_corr_var"] == "Humidity"
        assert _events(at, "variable_select")[-1]["via"] == "heatmap"

    def test_same_cell_selects_again_after_clear(self, app, heatmap):
        at = app("pages/1_Analysis.py").run()
        heatmap.click("Temperature", "Humidity")
        at.run()
        at.button(key="corr_clear").click().run()
        assert at.session_state["opt_corr_var"] is None

        heatmap.click("Temperature", "Humidity")
        at.run()
        assert at.session_state["opt_corr_var"] == "Humidity"

    def test_button_pick_is_not_overridden_by_old_click(self, app, heatmap):
        at = app("pages/1_Analysis.py").run()
        heatmap.click("Temperature", "Humidity")
        at.run()
        at.button(key="corr_btn_CO₂").click().run()
        assert at.session_state["opt_corr_var"] == "CO₂"

        heatmap.click("Temperature", "Humidity")
        at.run()
        assert at.session_state["opt_corr_var"] == "Humidity"
        assert len(set(heatmap.keys)) == 2

    def test_lists_strongest_pairs(self, app):
        at = app("pages/1_Analysis.py").run()
        captions = [c.value for c in at.caption]
        assert any(c.startswith("Strongest relationships: Temperature ↔ CO₂ (+0.85)") for c in captions)
