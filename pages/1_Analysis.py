# pages/1_Analysis.py
import streamlit as st

from climate_analytics import panels, ui

settings = panels.configure_page("Analysis")
panels.render_header()

st.markdown("## Analysis")
st.caption("Temperature trends, precipitation patterns and how the climate variables move together.")

panels.render_temperature()
st.divider()

left, right = st.columns(2, gap="large")
with left:
    panels.render_precipitation()
with right:
    panels.render_correlations()

panels.render_admin_analytics(settings)
ui.footer()
