from __future__ import annotations

import time
from typing import Callable, Optional


Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class ThrottleGate:
    """
    Rate limiter for move notifications.

    A candidate is admitted when at least ``duration_ms`` milliseconds have
    passed since the last admitted one. Rejected candidates are dropped,
    never queued. A duration of 0 admits everything.
    """

    def __init__(self, duration_ms: float = 0.0, clock: Optional[Clock] = None) -> None:
        self._duration_ms = 0.0
        self.duration_ms = duration_ms
        self._clock = clock or monotonic_ms
        self._last_emit_ms: Optional[float] = None  # None: nothing admitted yet

    @property
    def duration_ms(self) -> float:
        return self._duration_ms

    @duration_ms.setter
    def duration_ms(self, value: float) -> None:
        value = float(value)
        if value < 0.0:
            raise ValueError("Throttle duration must be non-negative")
        self._duration_ms = value

    @property
    def last_emit_ms(self) -> Optional[float]:
        return self._last_emit_ms

    def admit(self) -> bool:
        now = self._clock()
        if self._last_emit_ms is not None and now - self._last_emit_ms < self._duration_ms:
            return False
        self._last_emit_ms = now
        return True

    def reset(self) -> None:
        self._last_emit_ms = None
