# pages/2_Predictions.py
import streamlit as st

from climate_analytics import panels, ui

settings = panels.configure_page("Predictions")
panels.render_header()

st.markdown("## Predictions")
st.caption("Projected temperatures under three emission scenarios, with the regional picture alongside.")

left, right = st.columns([0.58, 0.42], gap="large")
with left:
    panels.render_predictions()
with right:
    panels.render_world_map()

panels.render_admin_analytics(settings)
ui.footer()
