from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, MutableMapping

import pandas as pd

PACKAGE_LOGGER = "climate_analytics"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)

STREAM_HANDLER = logging.StreamHandler()
STREAM_HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Streamlit re-executes the page script on every interaction, so this is
    called many times per session; the handler is only added once.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if STREAM_HANDLER not in root.handlers:
        root.addHandler(STREAM_HANDLER)
    return root


# ---------- In-session analytics ----------
def log_event(state: MutableMapping, event: str, **payload: Any) -> dict:
    if "analytics" not in state:
        state["analytics"] = []
    record = {"ts": datetime.now().isoformat(), "event": event, **payload}
    state["analytics"].append(record)
    logger.debug("event %s %s", event, payload)
    return record


def events_frame(state: MutableMapping) -> pd.DataFrame:
    events = state.get("analytics") or []
    if not events:
        return pd.DataFrame(columns=["ts", "event"])
    return pd.DataFrame(events)
