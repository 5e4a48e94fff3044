from __future__ import annotations

import enum
import logging
import time
from typing import Callable, MutableMapping

logger = logging.getLogger(__name__)

STATE_KEY = "load_state"


class LoadState(enum.Enum):
    LOADING = "loading"
    READY = "ready"


class LoadingGate:
    """Two-state gate held in session state: LOADING until the artificial
    delay has elapsed once, READY for the rest of the session."""

    def __init__(self, state: MutableMapping, delay: float = 2.0,
                 sleep: Callable[[float], None] = time.sleep, key: str = STATE_KEY):
        self._state = state
        self._delay = delay
        self._sleep = sleep
        self._key = key
        if self._key not in self._state:
            self._state[self._key] = LoadState.LOADING.value

    @property
    def status(self) -> LoadState:
        return LoadState(self._state[self._key])

    @property
    def is_ready(self) -> bool:
        return self.status is LoadState.READY

    def wait(self) -> LoadState:
        if self.is_ready:
            return self.status
        logger.info("simulating data load (%.1fs)", self._delay)
        self._sleep(self._delay)
        self._state[self._key] = LoadState.READY.value
        return self.status
