# src/seanle/engine/collisions.py
# Engine-side passability and on-enter tile effects (no pygame).
# Effects only touch the grid; the caller applies them to player/enemy state.

from __future__ import annotations

from typing import Dict, List, Union

from ..grid import in_bounds
from ..tiles import (
    FLOOR, TRAP, KEY, TIME_BONUS, LETTER_CHARS, is_letter,
    passable_for_player, passable_for_enemy,
)

Event = Dict[str, Union[bool, str, None]]


# ---------- Passability ----------

def is_passable(actor: str, grid: List[List[int]], r: int, c: int) -> bool:
    if not in_bounds(r, c):
        return False
    tile = grid[r][c]
    if actor == "player":
        return passable_for_player(tile)
    if actor == "enemy":
        return passable_for_enemy(tile)
    raise ValueError(f"unknown actor {actor!r}")


# ---------- Enter effects ----------

def on_enter_player(grid: List[List[int]], r: int, c: int) -> Event:
    """
    Consume whatever the player just stepped on. Returns flags:
      time_bonus / trap / key  -> consumed, tile now FLOOR
      letter                   -> "S"/"E"/"A"/"N", tile now FLOOR
    Floor and cracked walls produce no flags.
    """
    events: Event = {"time_bonus": False, "trap": False, "key": False, "letter": None}
    tile = grid[r][c]

    if tile == TIME_BONUS:
        grid[r][c] = FLOOR
        events["time_bonus"] = True
        return events

    if tile == TRAP:
        grid[r][c] = FLOOR
        events["trap"] = True
        return events

    if tile == KEY:
        grid[r][c] = FLOOR
        events["key"] = True
        return events

    if is_letter(tile):
        grid[r][c] = FLOOR
        events["letter"] = LETTER_CHARS[tile]

    return events
