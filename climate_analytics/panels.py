"""Streamlit panels.

Each panel generates its dataset once per session (``mount``), keeps its
view selection under its own ``st.session_state`` keys and recomputes the
display aggregates on every rerun.
"""
from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date
from typing import Callable, Dict, Iterable, MutableMapping, Optional

import numpy as np
import pandas as pd
import streamlit as st
from streamlit_plotly_events import plotly_events

from climate_analytics import charts, generators, ui
from climate_analytics.config import Settings, is_admin, load_settings, make_rng
from climate_analytics.correlation import correlation_color, correlation_strength, legend_entries
from climate_analytics.errors import ConfigError
from climate_analytics.insights import (
    CATEGORY_KEYS, category_label, filter_insights, find_insight, impact_label, impact_style,
    insights_summary,
)
from climate_analytics.loading import LoadingGate
from climate_analytics.logging_utils import configure_logging, events_frame, log_event
from climate_analytics.predictions import (
    DEFAULT_SCENARIO, DEFAULT_TIMEFRAME, SCENARIOS, TIMEFRAMES, filter_scenario, filter_timeframe,
    get_scenario, projection_summary,
)
from climate_analytics.regions import find_region, regions_frame, risk_badge, view_for
from climate_analytics.stats import TEMPERATURE_METRICS, precipitation_summary, temperature_summary

logger = logging.getLogger(__name__)

DATA_PREFIX = "data_"
STRONGEST_PAIRS = 3

DATASETS: Dict[str, Callable[[np.random.Generator], object]] = {
    "temperature": generators.generate_temperature_series,
    "precipitation": generators.generate_precipitation_series,
    "regional": lambda rng: generators.generate_regional_distribution(),
    "predictions": generators.generate_prediction_series,
    "correlation": lambda rng: generators.generate_correlation_matrix(),
    "regions": lambda rng: generators.generate_region_samples(),
    "insights": lambda rng: generators.generate_insights(),
    "stats": lambda rng: generators.headline_stats(),
}


# ---------- Dataset lifecycle ----------
def mount(state: MutableMapping, key: str, factory: Callable[[], object]):
    """Return the stored dataset for ``key``, generating it on first use."""
    slot = DATA_PREFIX + key
    if slot not in state:
        state[slot] = factory()
        log_event(state, "data_generated", dataset=key)
    return state[slot]


def regenerate(state: MutableMapping, keys: Iterable[str] = DATASETS) -> list:
    dropped = []
    for key in keys:
        slot = DATA_PREFIX + key
        if slot in state:
            del state[slot]
            dropped.append(key)
    return dropped


def _rng() -> np.random.Generator:
    if "rng" not in st.session_state:
        st.session_state["rng"] = make_rng(st.session_state["settings"])
    return st.session_state["rng"]


def dataset(name: str):
    factory = DATASETS[name]
    return mount(st.session_state, name, lambda: factory(_rng()))


def _default(key: str, value):
    if key not in st.session_state:
        st.session_state[key] = value


def _csv_button(df: pd.DataFrame, file_name: str, key: str):
    st.download_button(
        "Download data (CSV)",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name=file_name,
        mime="text/csv",
        key=key,
    )


# ---------- Page setup (every page) ----------
def configure_page(page_title: str) -> Settings:
    st.set_page_config(page_title=page_title, page_icon="🌍", layout="wide",
                       initial_sidebar_state="collapsed")
    try:
        settings = load_settings()
    except ConfigError as e:
        st.error(f"Invalid configuration: {e}")
        st.stop()
    configure_logging(settings.log_level)
    st.session_state["settings"] = settings
    ui.apply_styles()
    return settings


def render_header():
    if ui.header():
        dropped = regenerate(st.session_state)
        log_event(st.session_state, "data_refreshed", datasets=",".join(dropped))
        logger.info("regenerated %d datasets", len(dropped))


def await_data(settings: Settings):
    """Hold the page on the loading indicator until the artificial delay has passed once."""
    gate = LoadingGate(st.session_state, settings.loading_delay)
    if gate.is_ready:
        return
    placeholder = st.empty()
    with placeholder.container():
        ui.loading_indicator()
        with st.spinner("Loading climate data…"):
            gate.wait()
    placeholder.empty()
    log_event(st.session_state, "loading_ready", delay=settings.loading_delay)


# ---------- Stats grid ----------
def render_stats_grid():
    stats = dataset("stats")
    cols = st.columns(len(stats))
    for col, stat in zip(cols, stats):
        with col:
            st.markdown(ui.stat_card_html(stat), unsafe_allow_html=True)


# ---------- Temperature ----------
def _on_metric_change():
    log_event(st.session_state, "metric_change", metric=st.session_state["opt_metric_temp"])


def render_temperature():
    ui.section_header("Temperature Trends", "🌡️", "Live Data", "🟢")
    df = dataset("temperature")
    _default("opt_metric_temp", "temperature")
    metric = st.radio(
        "Metric", list(TEMPERATURE_METRICS), key="opt_metric_temp", horizontal=True,
        format_func=lambda m: TEMPERATURE_METRICS[m][0], label_visibility="collapsed",
        on_change=_on_metric_change,
    )
    st.plotly_chart(charts.temperature_chart(df, metric), use_container_width=True,
                    config={"displayModeBar": False})
    s = temperature_summary(df, metric)
    ui.kpi_row([
        (s["current"], "Current Value", "#111827"),
        (s["annual_change"], "Annual Change", "#16a34a"),
        (s["total_change"], "Total Change", "#2563eb"),
    ])
    _csv_button(df, "temperature_series.csv", "dl_temp")


# ---------- Precipitation ----------
CHART_TYPES = {"bar": "📊 Monthly Trends", "pie": "🥧 Regional Distribution"}


def _on_chart_type_change():
    log_event(st.session_state, "chart_type_change", chart=st.session_state["opt_chart_precip"])


def render_precipitation():
    ui.section_header("Precipitation Patterns", "💧", "Statistical", "📊")
    df = dataset("precipitation")
    regional = dataset("regional")
    _default("opt_chart_precip", "bar")
    chart_type = st.radio(
        "Chart type", list(CHART_TYPES), key="opt_chart_precip", horizontal=True,
        format_func=CHART_TYPES.get, label_visibility="collapsed", on_change=_on_chart_type_change,
    )
    if chart_type == "bar":
        fig = charts.precipitation_bar_chart(df)
    else:
        fig = charts.regional_pie_chart(regional)
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})
    s = precipitation_summary(df)
    ui.kpi_row([
        (f"{s['average']}mm", "Average Monthly", "#111827"),
        (f"{s['peak']}mm", "Peak Month", "#16a34a"),
        (f"{s['total']}mm", "Annual Total", "#2563eb"),
    ])
    _csv_button(df, "precipitation_monthly.csv", "dl_precip")


# ---------- World map ----------
def render_world_map():
    ui.section_header("Global Overview", "🌐", "Interactive", "🗺️")
    settings: Settings = st.session_state["settings"]
    regions = dataset("regions")
    names = ["—"] + [r.name for r in regions]
    _default("opt_region_map", "—")
    choice = st.radio("Region", names, key="opt_region_map", horizontal=True,
                      format_func=lambda v: "World" if v == "—" else v, label_visibility="collapsed")
    selected = find_region(regions, None if choice == "—" else choice)
    if st.session_state.get("_last_region_logged") != choice:
        if selected is not None:
            log_event(st.session_state, "region_select", region=selected.name)
        st.session_state["_last_region_logged"] = choice

    frame = regions_frame(regions)
    fig = charts.world_map(frame, view_for(selected), settings.tile_url,
                           selected.name if selected else None)
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})
    st.caption(settings.tile_attribution)

    if selected is not None:
        bg, fg = risk_badge(selected.risk)
        st.markdown(f"#### {selected.name}")
        ui.kpi_row([
            (f"{selected.temperature}°C", "Average Temperature", "#111827"),
            (f"{selected.co2:g} ppm", "CO₂ Concentration", "#111827"),
            (selected.risk, "Climate Risk", fg),
        ])
        st.markdown(ui.pill(f"Risk: {selected.risk}", fg, bg), unsafe_allow_html=True)
    _csv_button(frame[["name", "lat", "lon", "temperature", "co2", "risk"]], "regions.csv", "dl_regions")


# ---------- Correlations ----------
def _corr_heatmap_key() -> str:
    return f"corr_heatmap_{st.session_state.get('_corr_heatmap_gen', 0)}"


def _set_corr_var(var, via: str):
    st.session_state["opt_corr_var"] = var
    if via != "heatmap":
        # a fresh component key drops the click the heatmap would replay
        st.session_state["_corr_heatmap_gen"] = st.session_state.get("_corr_heatmap_gen", 0) + 1
    if var is not None:
        log_event(st.session_state, "variable_select", variable=var, via=via)


def render_correlations():
    ui.section_header("Variable Correlations", "📈", "ML Analysis", "⚙️")
    matrix = dataset("correlation")
    _default("opt_corr_var", None)

    cols = st.columns(len(matrix.variables))
    for col, var in zip(cols, matrix.variables):
        with col:
            kind = "primary" if st.session_state["opt_corr_var"] == var else "secondary"
            if st.button(var, key=f"corr_btn_{var}", type=kind, use_container_width=True):
                _set_corr_var(var, "button")
                st.rerun()

    fig = charts.correlation_heatmap(matrix, st.session_state["opt_corr_var"])
    events = plotly_events(fig, click_event=True, hover_event=False, override_height=420,
                           override_width="100%", key=_corr_heatmap_key())
    if events:
        var = events[0].get("y")
        if var in matrix.variables and var != st.session_state["opt_corr_var"]:
            _set_corr_var(var, "heatmap")
            st.rerun()

    selected = st.session_state["opt_corr_var"]
    if selected:
        st.markdown(f"#### {selected} Correlations")
        for other, r in matrix.related(selected):
            width = int(abs(r) * 100)
            st.markdown(
                f"""
                <div style="display:flex; align-items:center; gap:12px; margin:4px 0;">
                  <span style="width:120px; font-size:14px;">{other}</span>
                  <div style="width:140px; background:#e5e7eb; border-radius:999px; height:8px;">
                    <div style="width:{width}%; background:{correlation_color(r)}; height:8px; border-radius:999px;"></div>
                  </div>
                  <span style="font-size:13px; font-weight:600;">{r:.2f}</span>
                  <span style="font-size:12px; color:#6b7280;">{correlation_strength(r)}</span>
                </div>
                """,
                unsafe_allow_html=True,
            )
        if st.button("Clear selection", key="corr_clear"):
            _set_corr_var(None, "clear")
            st.rerun()

    legend = "".join(
        f"<span class='legend-chip'><span class='legend-swatch' style='background:{color}'></span>{label}</span>"
        for label, color in legend_entries()
    )
    st.markdown(legend, unsafe_allow_html=True)
    top = " · ".join(f"{a} ↔ {b} ({r:+.2f})" for a, b, r in matrix.strongest_pairs(STRONGEST_PAIRS))
    st.caption(f"Strongest relationships: {top}")
    frame = matrix.to_frame().reset_index().rename(columns={"index": "variable"})
    _csv_button(frame, "correlation_matrix.csv", "dl_corr")


# ---------- Predictions ----------
def _on_scenario_change():
    log_event(st.session_state, "scenario_change", scenario=st.session_state["opt_scenario"])


def _on_timeframe_change():
    log_event(st.session_state, "timeframe_change", years=st.session_state["opt_timeframe"])


def render_predictions(current_year: Optional[int] = None):
    ui.section_header("Climate Predictions", "⚠️", "ML Model", "✅")
    current_year = current_year or date.today().year
    df = dataset("predictions")
    _default("opt_scenario", DEFAULT_SCENARIO)
    _default("opt_timeframe", DEFAULT_TIMEFRAME)

    c1, c2 = st.columns(2)
    with c1:
        st.selectbox("Climate Scenario", list(SCENARIOS), key="opt_scenario",
                     format_func=lambda k: f"{SCENARIOS[k].icon} {SCENARIOS[k].name}",
                     on_change=_on_scenario_change)
    with c2:
        st.selectbox("Timeframe", TIMEFRAMES, key="opt_timeframe",
                     format_func=lambda y: f"{y} Years", on_change=_on_timeframe_change)

    scenario = get_scenario(st.session_state["opt_scenario"])
    years = int(st.session_state["opt_timeframe"])
    st.markdown(
        f"""
        <div style="padding:12px 16px; border-radius:10px; border:1px solid {scenario.border}; background:{scenario.background};">
          <div style="font-weight:700; color:{scenario.color};">{scenario.icon} {scenario.name} Scenario</div>
          <div style="font-size:14px; color:#374151;">{scenario.description}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )

    view = filter_scenario(filter_timeframe(df, years), scenario.key, current_year)
    st.plotly_chart(charts.prediction_chart(view, current_year), use_container_width=True,
                    config={"displayModeBar": False})
    s = projection_summary(view)
    ui.kpi_row([
        (f"{s['projected']}°C", f"Projected Temperature ({years} year projection)", "#2563eb"),
        (f"{s['rise']}°C", "Temperature Rise (from baseline)", "#16a34a"),
        (s["risk"], "Risk Level", "#ea580c"),
    ])
    _csv_button(view, f"predictions_{scenario.key}_{years}y.csv", "dl_pred")


# ---------- Insights ----------
def _on_filter_change():
    st.session_state["opt_insight_sel"] = None
    log_event(st.session_state, "insight_filter", category=st.session_state["opt_insight_filter"])


def _insight_card(insight) -> str:
    accent, bg, border = insight.palette
    fg, badge_bg = impact_style(insight.impact)
    return f"""
    <div style="border:1px solid {border}; background:{bg}; border-radius:10px; padding:12px 14px; margin-bottom:6px;">
      <div style="display:flex; justify-content:space-between; align-items:center;">
        <span style="font-weight:600; color:#111827;"><span style="color:{accent};">{insight.icon}</span> {insight.title}</span>
        {ui.pill(impact_label(insight.impact), fg, badge_bg)}
      </div>
      <div style="font-size:14px; color:#374151; margin:.4rem 0;">{insight.description}</div>
      <div style="display:flex; justify-content:space-between; font-size:12px; color:#4b5563;">
        <span>{insight.confidence}% confidence</span><span>{insight.type.upper()}</span>
      </div>
    </div>
    """


def render_insights():
    ui.section_header("Data Insights", "🧭", "Analytics", "📊")
    insights = dataset("insights")
    _default("opt_insight_filter", "all")
    _default("opt_insight_sel", None)

    category = st.radio("Category", CATEGORY_KEYS, key="opt_insight_filter", horizontal=True,
                        format_func=category_label, label_visibility="collapsed",
                        on_change=_on_filter_change)
    shown = filter_insights(insights, category)
    if not shown:
        st.info("No insights in this category.", icon="ℹ️")

    grid = st.columns(2)
    for n, insight in enumerate(shown):
        with grid[n % 2]:
            st.markdown(_insight_card(insight), unsafe_allow_html=True)
            if st.button("Details", key=f"insight_btn_{insight.id}"):
                st.session_state["opt_insight_sel"] = insight.id
                log_event(st.session_state, "insight_select", insight=insight.id)

    selected = find_insight(insights, st.session_state["opt_insight_sel"])
    if selected is not None:
        accent, bg, border = selected.palette
        with st.container(border=True):
            top_l, top_r = st.columns([0.9, 0.1])
            with top_l:
                st.markdown(f"### {selected.icon} {selected.title}")
                st.caption(f"{selected.type.upper()} • {selected.confidence}% confidence")
            with top_r:
                if st.button("✕", key="insight_close"):
                    st.session_state["opt_insight_sel"] = None
                    st.rerun()
            st.write(selected.description)
            ui.kpi_row([
                (f"{selected.confidence}%", "Confidence Level", accent),
                (impact_label(selected.impact), "Impact Level", accent),
                (selected.type.upper(), "Analysis Type", accent),
            ])

    st.markdown("---")
    s = insights_summary(insights)
    ui.kpi_row([
        (s["total"], "Total Insights", "#111827"),
        (s["high_confidence"], "High Confidence", "#111827"),
        (s["critical_or_high"], "Critical/High Impact", "#111827"),
        (f"{s['avg_confidence']}%", "Avg Confidence", "#111827"),
    ])
    _csv_button(pd.DataFrame([asdict(i) for i in insights]), "insights.csv", "dl_insights")


# ---------- Admin ----------
def render_admin_analytics(settings: Settings):
    if not is_admin(settings, st.query_params):
        return
    st.divider()
    st.subheader("Admin: Session analytics")
    st.caption("Lightweight, in-session logs. Export below. (Counts reset per session.)")
    df_log = events_frame(st.session_state)
    if df_log.empty:
        st.info("No events logged yet in this session.", icon="ℹ️")
        return
    st.dataframe(df_log, use_container_width=True)
    st.download_button(
        "Download logs (CSV)",
        data=df_log.to_csv(index=False).encode("utf-8"),
        file_name="session_analytics.csv",
        mime="text/csv",
        key="dl_analytics",
    )
    counts = df_log["event"].value_counts()
    for event, n in counts.items():
        st.markdown(f"- **{event}:** {n}")
