# pages/3_Insights.py
import streamlit as st

from climate_analytics import panels, ui

settings = panels.configure_page("Insights")
panels.render_header()

st.markdown("## Insights")
panels.render_stats_grid()
st.divider()
panels.render_insights()

panels.render_admin_analytics(settings)
ui.footer()
