"""Synthetic climate analytics dashboard (Streamlit + Plotly)."""

__version__ = "0.1.0"
