# src/seanle/engine/enemy.py
# Enemy pursuit: full BFS from enemy to player on every tick, take the first step.
# ----------------------------------------------------------------------------
# - Expansion order is up, down, left, right; the first-discovered parent wins,
#   so ties between equal-length routes resolve in that order.
# - A neighbour is expandable when passable for the enemy (no cracked walls)
#   or when it is the player's cell itself.
# - No path: hold position. Nothing is cached between ticks; the player and
#   the grid both change in between.
# - Stepping onto the player is reported as a catch and the enemy does not move,
#   same outcome as starting the tick on the player's cell.
# ----------------------------------------------------------------------------
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..grid import NEIGHBOURS, in_bounds
from .collisions import is_passable

RC = Tuple[int, int]


def shortest_path(grid: List[List[int]], start: RC, goal: RC) -> Optional[List[RC]]:
    """
    Cells from the first step up to and including `goal` (start excluded).
    [] when start == goal, None when unreachable.
    """
    if start == goal:
        return []

    queue = deque([start])
    visited = {start}
    parent: Dict[RC, RC] = {}

    found = False
    while queue:
        r, c = queue.popleft()
        if (r, c) == goal:
            found = True
            break
        for dr, dc in NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if not in_bounds(nr, nc) or (nr, nc) in visited:
                continue
            if is_passable("enemy", grid, nr, nc) or (nr, nc) == goal:
                visited.add((nr, nc))
                parent[(nr, nc)] = (r, c)
                queue.append((nr, nc))

    if not found:
        return None

    path: List[RC] = []
    cur = goal
    while cur != start:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


def next_step(grid: List[List[int]], start: RC, goal: RC) -> Optional[RC]:
    path = shortest_path(grid, start, goal)
    if not path:
        return None
    return path[0]


@dataclass
class Enemy:
    row: int = -1
    col: int = -1
    active: bool = False

    @property
    def pos(self) -> RC:
        return (self.row, self.col)

    def spawn(self, grid: List[List[int]], at: RC) -> None:
        """Activate at `at`. Only ever called once per session."""
        r, c = at
        if not is_passable("enemy", grid, r, c):
            raise ValueError(f"enemy cannot stand on {at}")
        self.row, self.col = r, c
        self.active = True


@dataclass
class EnemyTickEvents:
    player_hit: bool = False
    moved: bool = False
    path_found: bool = True


def pursue(enemy: Enemy, grid: List[List[int]], player_pos: RC) -> EnemyTickEvents:
    """One pursuit tick. Mutates only the enemy's position."""
    ev = EnemyTickEvents()
    if not enemy.active:
        return ev

    if enemy.pos == player_pos:
        ev.player_hit = True
        return ev

    step = next_step(grid, enemy.pos, player_pos)
    if step is None:
        ev.path_found = False
        return ev

    if step == player_pos:
        ev.player_hit = True
        return ev

    enemy.row, enemy.col = step
    ev.moved = True
    return ev
