"""Tests for settings resolution."""

from types import SimpleNamespace

import pytest

from climate_analytics import config
from climate_analytics.config import DEFAULT_TILE_URL, Settings, is_admin, load_settings, make_rng
from climate_analytics.errors import ConfigError

KEYS = ["LOADING_DELAY_SECONDS", "MAP_TILE_URL", "MAP_TILE_ATTRIBUTION", "RANDOM_SEED", "LOG_LEVEL", "IS_ADMIN"]


@pytest.fixture
def secrets(monkeypatch):
    """Replace st.secrets with a plain dict and clear the related env vars."""
    store = {}
    monkeypatch.setattr(config, "st", SimpleNamespace(secrets=store))
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)
    return store


class TestLoadSettings:
    def test_defaults(self, secrets):
        s = load_settings()
        assert s == Settings()
        assert s.tile_url == DEFAULT_TILE_URL

    def test_env(self, secrets, monkeypatch):
        monkeypatch.setenv("LOADING_DELAY_SECONDS", "0.25")
        monkeypatch.setenv("RANDOM_SEED", "42")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = load_settings()
        assert s.loading_delay == 0.25
        assert s.random_seed == 42
        assert s.log_level == "DEBUG"

    def test_secrets_win_over_env(self, secrets, monkeypatch):
        monkeypatch.setenv("MAP_TILE_URL", "https://env.example/{z}/{x}/{y}.png")
        secrets["MAP_TILE_URL"] = "https://secret.example/{z}/{x}/{y}.png"
        assert load_settings().tile_url == "https://secret.example/{z}/{x}/{y}.png"

    def test_bad_delay(self, secrets, monkeypatch):
        monkeypatch.setenv("LOADING_DELAY_SECONDS", "soon")
        with pytest.raises(ConfigError) as exc:
            load_settings()
        assert exc.value.key == "LOADING_DELAY_SECONDS"

    def test_negative_delay(self, secrets, monkeypatch):
        monkeypatch.setenv("LOADING_DELAY_SECONDS", "-1")
        with pytest.raises(ConfigError):
            load_settings()

    def test_bad_seed(self, secrets, monkeypatch):
        monkeypatch.setenv("RANDOM_SEED", "abc")
        with pytest.raises(ConfigError) as exc:
            load_settings()
        assert exc.value.key == "RANDOM_SEED"

    def test_unreadable_secrets_fall_back_to_env(self, monkeypatch):
        class Broken:
            def __contains__(self, key):
                raise FileNotFoundError("no secrets.toml")

        monkeypatch.setattr(config, "st", SimpleNamespace(secrets=Broken()))
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert config.secret_or_env("LOG_LEVEL", "INFO") == "warning"


class TestHelpers:
    def test_seeded_rng_is_reproducible(self):
        a = make_rng(Settings(random_seed=3)).uniform(size=4)
        b = make_rng(Settings(random_seed=3)).uniform(size=4)
        assert (a == b).all()

    @pytest.mark.parametrize("params,expected", [
        ({}, False), ({"admin": "1"}, True), ({"admin": "0"}, False), ({"admin": ["1"]}, True),
    ])
    def test_is_admin_query_param(self, params, expected):
        assert is_admin(Settings(), params) is expected

    def test_is_admin_setting(self, secrets, monkeypatch):
        monkeypatch.setenv("IS_ADMIN", "true")
        assert is_admin(load_settings(), {})
