# Page chrome shared by every page: styles, header, loading indicator, footer.
from __future__ import annotations

from html import escape

import streamlit as st

NAV_PAGES = [
    ("Home_Page.py", "Overview", "🌍"),
    ("pages/1_Analysis.py", "Analysis", "📊"),
    ("pages/2_Predictions.py", "Predictions", "🔮"),
    ("pages/3_Insights.py", "Insights", "💡"),
]

# ---------- Styles ----------
STYLES = """
<style>
:root { --muted:#64748b; }
h1, h2, h3 { letter-spacing:.2px; }
.subtitle { text-align:center; color:#64748b; margin-top:-.4rem; }
.card { border:1px solid #e5e7eb; border-radius:14px; padding:12px 14px; background:#fafafa; }
.hero { padding:12px 16px; border:1px solid #e5e7eb; border-radius:14px; background:#f8fafc; margin-bottom:.75rem; }
.badge { padding:4px 8px; border-radius:999px; background:#eef2ff; border:1px solid #e0e7ff; font-size:12px; }
.footer-box { padding:16px; border-top:1px solid #e5e7eb; margin-top:1rem; color:#64748b; text-align:center; }
.stat-card { border:1px solid #e5e7eb; border-radius:14px; padding:14px 16px; background:#ffffff; height:100%; }
.stat-card .title { font-size:12px; color:#4b5563; text-transform:uppercase; letter-spacing:.05em; }
.stat-card .value { font-size:28px; font-weight:700; color:#111827; margin:.15rem 0; }
.stat-card .desc { font-size:12px; color:#6b7280; }
.kpi { text-align:center; }
.kpi .v { font-size:24px; font-weight:700; }
.kpi .l { font-size:13px; color:#4b5563; }
.section-head { display:flex; justify-content:space-between; align-items:center; margin:.25rem 0 .5rem 0; }
.section-head h3 { margin:0; }
.legend-chip { display:inline-flex; align-items:center; gap:6px; font-size:12px; color:#4b5563; margin-right:12px; }
.legend-swatch { width:12px; height:12px; border-radius:3px; display:inline-block; }
</style>
"""


def apply_styles():
    st.markdown(STYLES, unsafe_allow_html=True)


def header(refresh_key: str = "header_refresh") -> bool:
    """Title row, navigation and the Refresh action. Returns True when Refresh was clicked."""
    left, mid, right = st.columns([0.38, 0.47, 0.15], gap="small")
    with left:
        st.markdown("### 🌍 ClimateScope")
        st.caption("Climate Data Analytics")
    with mid:
        cols = st.columns(len(NAV_PAGES))
        for col, (path, label, icon) in zip(cols, NAV_PAGES):
            with col:
                try:
                    st.page_link(path, label=label, icon=icon)
                except Exception:
                    # page_link needs the multipage runtime; plain label otherwise
                    st.markdown(f"{icon} **{label}**")
    with right:
        clicked = st.button("🔄 Refresh", key=refresh_key, use_container_width=True,
                            help="Regenerate every synthetic dataset.")
    st.divider()
    return clicked


def section_header(title: str, icon: str, tag: str, tag_icon: str = "●"):
    st.markdown(
        f"""
        <div class="section-head">
          <h3>{icon} {escape(title)}</h3>
          <span class="badge">{tag_icon} {escape(tag)}</span>
        </div>
        """,
        unsafe_allow_html=True,
    )


def kpi_row(items):
    """items: (value, label, color) tuples rendered as centered figures."""
    cols = st.columns(len(items))
    for col, (value, label, color) in zip(cols, items):
        with col:
            st.markdown(
                f"<div class='kpi'><div class='v' style='color:{color}'>{escape(str(value))}</div>"
                f"<div class='l'>{escape(label)}</div></div>",
                unsafe_allow_html=True,
            )


def stat_card_html(stat: dict) -> str:
    trend_icon = {"up": "📈", "down": "📉"}.get(stat["trend"], "✅")
    change_color = {"up": "#16a34a", "down": "#dc2626"}.get(stat["trend"], "#4b5563")
    return f"""
    <div class="stat-card">
      <div style="display:flex; justify-content:space-between; align-items:center;">
        <span style="font-size:22px; color:{stat['color']};">{stat['icon']}</span>
        <span>{trend_icon}</span>
      </div>
      <div class="title">{escape(stat['title'])}</div>
      <div class="value">{escape(stat['value'])}</div>
      <div><span style="font-size:13px; font-weight:600; color:{change_color};">{escape(stat['change'])}</span>
           <span class="desc">vs last year</span></div>
      <div class="desc">{escape(stat['description'])}</div>
    </div>
    """


def pill(text: str, color: str, background: str) -> str:
    return (f"<span style='font-size:12px;padding:3px 8px;border-radius:999px;"
            f"color:{color};background:{background};'>{escape(text)}</span>")


def loading_indicator(message: str = "Loading climate data…"):
    st.markdown(
        f"""
        <div style="display:flex; flex-direction:column; align-items:center; margin-top:20vh;">
          <div style="font-size:48px;">🌍</div>
          <div style="color:#64748b; margin-top:.5rem;">{escape(message)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def footer():
    st.markdown("""
<div class="footer-box">
  <strong>Climate Data Analytics Dashboard</strong> - Advanced Data Science Portfolio Project<br>
  <span style="font-size:13px;">Built with Streamlit, Plotly and pandas. All figures are synthetic and regenerated per session.</span>
</div>
""", unsafe_allow_html=True)
