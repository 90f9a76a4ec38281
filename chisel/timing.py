"""Frame and fixed-tick time bookkeeping."""

from __future__ import annotations

import time as _time
from dataclasses import dataclass, field


@dataclass
class UnscaledTime:
    """Real time, unaffected by time scale."""

    time: float = 0.0
    delta_time: float = 0.0


@dataclass
class FixedTime:
    """Fixed-interval simulation tick time (50 Hz by default)."""

    time: float = 0.0
    delta_time: float = 0.02


@dataclass
class Time:
    """Scaled and real time for frames, plus fixed tick time."""

    time: float = 0.0
    delta_time: float = 0.0
    time_scale: float = 1.0
    max_delta_time: float = 0.25
    unscaled: UnscaledTime = field(default_factory=UnscaledTime)
    fixed: FixedTime = field(default_factory=FixedTime)
    frame_count: int = 0
    tick_count: int = 0

    def advance(self, dt: float) -> float:
        """Advance by ``dt`` real seconds; return the scaled delta."""
        self.unscaled.time += dt
        self.unscaled.delta_time = dt

        dt *= self.time_scale
        self.time += dt
        self.delta_time = dt
        return dt

    @staticmethod
    def get_time() -> float:
        """Current high-resolution clock reading in seconds."""
        return _time.perf_counter()