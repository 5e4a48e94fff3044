# Home_Page.py
import streamlit as st

from climate_analytics import panels, ui

settings = panels.configure_page("Global Climate Analytics")

# ---------- Loading (once per session) ----------
panels.await_data(settings)

panels.render_header()

# ---------- Hero ----------
st.markdown("<h1 style='text-align:center'>Global Climate Analytics</h1>", unsafe_allow_html=True)
st.markdown(
    "<div class='subtitle'>Comprehensive analysis of global climate data with advanced statistical modeling, "
    "interactive visualizations, and predictive insights for environmental research.</div>",
    unsafe_allow_html=True,
)
st.markdown("<div style='height:14px;'></div>", unsafe_allow_html=True)

# ---------- Key metrics ----------
panels.render_stats_grid()
st.divider()

# ---------- Temperature (wide) | Map ----------
left, right = st.columns([0.62, 0.38], gap="large")
with left:
    panels.render_temperature()
with right:
    panels.render_world_map()
st.divider()

# ---------- Precipitation | Correlations ----------
left, right = st.columns(2, gap="large")
with left:
    panels.render_precipitation()
with right:
    panels.render_correlations()
st.divider()

# ---------- Predictions | Insights ----------
left, right = st.columns(2, gap="large")
with left:
    panels.render_predictions()
with right:
    panels.render_insights()

# ---------- What's inside ----------
with st.expander("What’s inside this dashboard?", expanded=False):
    st.markdown("""
- **Data:** Every series is synthetic, generated in your session from a seasonal/trend curve plus random noise.
- **Refresh:** The Refresh button in the header regenerates every dataset.
- **Panels:** Temperature trends, precipitation patterns, a world overview map, variable correlations, scenario predictions and curated insights.
- **Exports:** Each panel downloads the exact data it is showing as CSV.
""")

panels.render_admin_analytics(settings)
ui.footer()
