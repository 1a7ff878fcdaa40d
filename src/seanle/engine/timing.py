# src/seanle/engine/timing.py
# Frame-time driven timers. The runtime feeds real dt (seconds) once per frame;
# the pursuit cadence and popup lifetimes are derived from it on the same loop.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..config import ENEMY_MOVE_INTERVAL_MS, TRAP_MESSAGE_MS, TIME_MESSAGE_MS, SUMMONED_MESSAGE_MS


@dataclass
class PursuitClock:
    """Fixed-interval ticker: one pursuit tick per whole interval of accumulated time."""
    interval_ms: int = ENEMY_MOVE_INTERVAL_MS
    _accum_ms: float = 0.0

    def advance(self, dt: float) -> int:
        """Add dt seconds; return how many ticks became due."""
        if dt < 0:
            raise ValueError("dt must be >= 0")
        self._accum_ms += dt * 1000.0
        due = int(self._accum_ms // self.interval_ms)
        self._accum_ms -= due * self.interval_ms
        return due

    def reset(self) -> None:
        self._accum_ms = 0.0


POPUP_DURATIONS_MS = {
    "trap": TRAP_MESSAGE_MS,
    "time": TIME_MESSAGE_MS,
    "summoned": SUMMONED_MESSAGE_MS,
}


@dataclass
class PopupTimers:
    # name -> remaining ms; 0 means hidden
    remaining: Dict[str, float] = field(default_factory=lambda: {k: 0.0 for k in POPUP_DURATIONS_MS})

    def show(self, name: str) -> None:
        self.remaining[name] = float(POPUP_DURATIONS_MS[name])

    def hide_all(self) -> None:
        for k in self.remaining:
            self.remaining[k] = 0.0

    def tick(self, dt: float) -> None:
        step = dt * 1000.0
        for k, v in self.remaining.items():
            if v > 0:
                self.remaining[k] = max(0.0, v - step)

    def visible(self, name: str) -> bool:
        return self.remaining.get(name, 0.0) > 0
