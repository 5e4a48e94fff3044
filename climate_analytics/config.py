import os
from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np
import streamlit as st

from climate_analytics.errors import ConfigError

DEFAULT_TILE_URL = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"
DEFAULT_TILE_ATTRIBUTION = "© OpenStreetMap contributors"

_TRUTHY = {"1", "true", "yes", "on"}


# ---------- Secrets / env ----------
def secret_or_env(key: str, default: str = "") -> str:
    try:
        if hasattr(st, "secrets") and key in st.secrets:
            return str(st.secrets[key])
    except Exception:
        # no secrets.toml on local runs
        pass
    return os.getenv(key, default)


@dataclass(frozen=True)
class Settings:
    loading_delay: float = 2.0
    tile_url: str = DEFAULT_TILE_URL
    tile_attribution: str = DEFAULT_TILE_ATTRIBUTION
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    is_admin: bool = False


def _parse_delay(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError("LOADING_DELAY_SECONDS", f"not a number: {raw!r}") from None
    if value < 0:
        raise ConfigError("LOADING_DELAY_SECONDS", "must be >= 0")
    return value


def _parse_seed(raw: str) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError("RANDOM_SEED", f"not an integer: {raw!r}") from None


def load_settings() -> Settings:
    """Resolve settings from st.secrets, then the environment, then defaults."""
    return Settings(
        loading_delay=_parse_delay(secret_or_env("LOADING_DELAY_SECONDS", "2.0")),
        tile_url=secret_or_env("MAP_TILE_URL", DEFAULT_TILE_URL) or DEFAULT_TILE_URL,
        tile_attribution=secret_or_env("MAP_TILE_ATTRIBUTION", DEFAULT_TILE_ATTRIBUTION),
        random_seed=_parse_seed(secret_or_env("RANDOM_SEED", "")),
        log_level=(secret_or_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        is_admin=secret_or_env("IS_ADMIN", "").strip().lower() in _TRUTHY,
    )


def make_rng(settings: Settings) -> np.random.Generator:
    return np.random.default_rng(settings.random_seed)


# Admin flag: show analytics panel if secrets say so, or ?admin=1
def is_admin(settings: Settings, query_params: Mapping) -> bool:
    if settings.is_admin:
        return True
    value = query_params.get("admin", "0")
    if isinstance(value, (list, tuple)):
        value = value[0] if value else "0"
    return str(value) == "1"
