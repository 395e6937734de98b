"""Accumulator timers driven by simulated frame deltas."""

from __future__ import annotations

from dataclasses import dataclass

# Ten 0.1 s steps sum to 0.9999999999999999; treat that as a full interval.
TIMER_EPSILON = 1e-9


@dataclass
class IntervalTimer:
    """Counts simulated seconds and fires once the interval is reached.

    The timer resets to zero on firing rather than carrying the remainder,
    so at most one trigger happens per :meth:`tick`.
    """

    elapsed: float = 0.0

    def tick(self, delta: float, interval: float) -> bool:
        self.elapsed += delta
        if self.elapsed + TIMER_EPSILON >= interval:
            self.elapsed = 0.0
            return True
        return False

    def reset(self) -> None:
        self.elapsed = 0.0
