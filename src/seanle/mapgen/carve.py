# src/seanle/mapgen/carve.py
# Recursive-backtracking maze carve on the odd lattice, plus the cracked-wall pass.
# Coordinates are (row, col), 0-based; rooms sit on odd coordinates.

import logging
from typing import List, Optional, Tuple

from ..config import START_POS, CRACK_CHANCE
from ..grid import Grid, empty_wall_grid, in_bounds, interior_cells
from ..rng import LCGRandom
from ..tiles import WALL, FLOOR, CRACK_WALL

logger = logging.getLogger(__name__)

RC = Tuple[int, int]

# Pre-shuffle order; the shuffle permutes this list in place per cell.
BASE_DIRECTIONS: Tuple[RC, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


def shuffled_directions(rng: LCGRandom) -> List[RC]:
    """Fisher–Yates over BASE_DIRECTIONS, one rng.range draw per swap (3 draws)."""
    dirs = list(BASE_DIRECTIONS)
    for i in range(len(dirs) - 1, 0, -1):
        j = rng.range(0, i)
        dirs[i], dirs[j] = dirs[j], dirs[i]
    return dirs


def carve_maze(rng: LCGRandom, start: RC = START_POS, trace: Optional[List[RC]] = None) -> Grid:
    """
    Carve a perfect maze out of an all-wall grid starting at `start`.

    Same visiting order as the recursive form: a cell shuffles its directions
    on arrival, then tries them one by one, descending into each unvisited
    neighbour before trying the next direction. The explicit stack holds
    (cell, remaining directions) frames.

    If `trace` is given, carved rooms are appended to it in visit order.
    """
    grid = empty_wall_grid()
    visited = set()

    def enter(cell: RC) -> Tuple[RC, List[RC]]:
        r, c = cell
        visited.add(cell)
        grid[r][c] = FLOOR
        if trace is not None:
            trace.append(cell)
        return (cell, shuffled_directions(rng))

    stack = [enter(start)]
    while stack:
        (r, c), remaining = stack[-1]
        if not remaining:
            stack.pop()
            continue
        dr, dc = remaining.pop(0)
        nr, nc = r + 2 * dr, c + 2 * dc
        if in_bounds(nr, nc) and (nr, nc) not in visited:
            grid[r + dr][c + dc] = FLOOR
            stack.append(enter((nr, nc)))

    logger.debug("carved %d rooms from %s", len(visited), start)
    return grid


def crack_walls(grid: Grid, rng: LCGRandom, chance: float = CRACK_CHANCE) -> int:
    """
    Row-major over the interior; every WALL consumes exactly one draw,
    other tiles consume none. Returns the number of walls cracked.
    """
    cracked = 0
    for r, c in interior_cells():
        if grid[r][c] == WALL and rng.next() < chance:
            grid[r][c] = CRACK_WALL
            cracked += 1
    return cracked
