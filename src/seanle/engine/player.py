# src/seanle/engine/player.py
# Engine-only Player: one tile per movement intent, tile effects via collisions.
# Enemy spawn and win/loss are decided by the session from the returned flags.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .collisions import is_passable, on_enter_player

RC = Tuple[int, int]

DIRS: Dict[str, RC] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


@dataclass
class Player:
    grid: List[List[int]]
    start: RC

    row: int = 0
    col: int = 0
    letters: List[str] = field(default_factory=list)  # collection order
    elapsed: float = 0.0                               # seconds
    bonus_seconds: float = 5.0

    def __post_init__(self) -> None:
        self.row, self.col = self.start

    @property
    def pos(self) -> RC:
        return (self.row, self.col)

    def add_time(self, dt: float) -> None:
        self.elapsed += dt

    def apply_time_bonus(self) -> None:
        self.elapsed = max(0.0, self.elapsed - self.bonus_seconds)

    def collect(self, letter: str) -> bool:
        """Append a letter unless already held. Returns True when it was new."""
        if letter in self.letters:
            return False
        self.letters.append(letter)
        return True

    def reset_to_start(self) -> None:
        self.row, self.col = self.start

    # ------------- Core move -------------
    def try_move(self, dr: int, dc: int) -> Dict[str, object]:
        """
        Step one tile by (dr, dc). A blocked or out-of-bounds target leaves
        every piece of state untouched and reports moved=False.
        """
        if (dr, dc) not in DIRS.values():
            raise ValueError(f"not a unit direction: {(dr, dc)}")

        nr, nc = self.row + dr, self.col + dc
        if not is_passable("player", self.grid, nr, nc):
            return {"moved": False}

        self.row, self.col = nr, nc
        ev = on_enter_player(self.grid, nr, nc)

        new_letter: Optional[str] = None
        if ev["time_bonus"]:
            self.apply_time_bonus()
        if ev["trap"]:
            self.reset_to_start()
        if ev["letter"] and self.collect(ev["letter"]):
            new_letter = ev["letter"]

        out: Dict[str, object] = {"moved": True, "new_letter": new_letter}
        out.update(ev)
        return out
