# src/seanle/mapgen/placement.py
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..config import (
    ROWS, COLS, START_POS,
    RESTRICTED_ROWS, RESTRICTED_COLS,
    TRAP_COUNT, TIME_BONUS_COUNT, PLACEMENT_MAX_DRAWS,
)
from ..grid import Grid
from ..rng import LCGRandom
from ..tiles import FLOOR, TRAP, TIME_BONUS, LETTERS, LETTER_CHARS, TILE_NAMES

logger = logging.getLogger(__name__)

RC = Tuple[int, int]


class GenerationExhausted(RuntimeError):
    """A placement ran out of draws without finding a free floor cell."""

    def __init__(self, tile: int, draws: int):
        super().__init__(f"could not place {TILE_NAMES.get(tile, tile)} after {draws} draws")
        self.tile = tile
        self.draws = draws


@dataclass
class FeatureLayout:
    traps: List[RC] = field(default_factory=list)
    time_bonuses: List[RC] = field(default_factory=list)
    letters: Dict[str, RC] = field(default_factory=dict)  # "S" -> (r, c)

    def all_cells(self) -> List[RC]:
        return self.traps + self.time_bonuses + list(self.letters.values())


def in_restricted_area(r: int, c: int) -> bool:
    return (RESTRICTED_ROWS[0] <= r <= RESTRICTED_ROWS[1]
            and RESTRICTED_COLS[0] <= c <= RESTRICTED_COLS[1])


def place_random_item(
    grid: Grid,
    rng: LCGRandom,
    tile_id: int,
    max_draws: int = PLACEMENT_MAX_DRAWS,
) -> RC:
    """
    Rejection-sample an interior cell:
    - Pick r then c, each via rng.range(1, N-2).
    - Require the cell to be FLOOR and outside the restricted rectangle.
    - Write the tile and return (r, c).
    Raises GenerationExhausted after `max_draws` rejected candidates.
    """
    for _ in range(max_draws):
        r = rng.range(1, ROWS - 2)
        c = rng.range(1, COLS - 2)
        if grid[r][c] != FLOOR or in_restricted_area(r, c):
            continue
        grid[r][c] = tile_id
        return (r, c)
    raise GenerationExhausted(tile_id, max_draws)


def apply_all_placements(
    grid: Grid,
    rng: LCGRandom,
    max_draws: int = PLACEMENT_MAX_DRAWS,
) -> FeatureLayout:
    """
    Order:
      1) start cell forced to FLOOR (no draw)
      2) traps ×5
      3) time bonuses ×4
      4) letters S, E, A, N
    Each placement only overwrites FLOOR, so features never share a cell.
    """
    sr, sc = START_POS
    grid[sr][sc] = FLOOR

    layout = FeatureLayout()
    for _ in range(TRAP_COUNT):
        layout.traps.append(place_random_item(grid, rng, TRAP, max_draws))
    for _ in range(TIME_BONUS_COUNT):
        layout.time_bonuses.append(place_random_item(grid, rng, TIME_BONUS, max_draws))
    for letter in LETTERS:
        layout.letters[LETTER_CHARS[letter]] = place_random_item(grid, rng, letter, max_draws)

    logger.debug("placed %d traps, %d bonuses, letters at %s",
                 len(layout.traps), len(layout.time_bonuses), layout.letters)
    return layout
