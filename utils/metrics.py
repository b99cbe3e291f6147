"""Request counters shared by the handlers of one app."""
from __future__ import annotations

import threading


class HitCounter:
    """Thread-safe counter. One per app, reached through ``app.extensions["hit_counter"]``."""

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._value
