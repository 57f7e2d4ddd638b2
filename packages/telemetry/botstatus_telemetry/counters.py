"""Message traffic counters shared between the chat loop and the provider."""

from __future__ import annotations

import threading
import time

from .models import Uptime


class BotCounters:
    def __init__(self, backend: str = "console", started_at: float | None = None) -> None:
        self.backend = backend
        self.started_at = time.time() if started_at is None else started_at
        self._lock = threading.Lock()
        self._sent = 0
        self._received = 0

    def record_incoming(self, count: int = 1) -> None:
        with self._lock:
            self._received += count

    def record_outgoing(self, count: int = 1) -> None:
        with self._lock:
            self._sent += count

    @property
    def sent_total(self) -> int:
        with self._lock:
            return self._sent

    @property
    def received_total(self) -> int:
        with self._lock:
            return self._received

    def uptime(self, now: float | None = None) -> Uptime:
        now = time.time() if now is None else now
        return Uptime.from_seconds(now - self.started_at)
