"""Tests for logging setup and the in-session event log."""

import logging

from climate_analytics.logging_utils import (
    PACKAGE_LOGGER, STREAM_HANDLER, configure_logging, events_frame, log_event,
)


class TestConfigureLogging:
    def test_idempotent(self):
        root = configure_logging("DEBUG")
        configure_logging("DEBUG")
        assert root.handlers.count(STREAM_HANDLER) == 1
        assert root.level == logging.DEBUG
        assert root.name == PACKAGE_LOGGER

    def test_unknown_level_defaults_to_info(self):
        assert configure_logging("chatty").level == logging.INFO


class TestEvents:
    def test_log_event_appends(self):
        state = {}
        log_event(state, "metric_change", metric="co2")
        log_event(state, "region_select", region="Asia")
        assert [e["event"] for e in state["analytics"]] == ["metric_change", "region_select"]
        assert state["analytics"][0]["metric"] == "co2"
        assert "ts" in state["analytics"][0]

    def test_events_frame(self):
        state = {}
        log_event(state, "loading_ready", delay=2.0)
        df = events_frame(state)
        assert list(df["event"]) == ["loading_ready"]

    def test_empty_frame(self):
        df = events_frame({})
        assert df.empty
        assert list(df.columns) == ["ts", "event"]
