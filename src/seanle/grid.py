from typing import Iterator, List, Tuple

from .config import ROWS, COLS
from .tiles import WALL, GLYPHS

RC = Tuple[int, int]
Grid = List[List[int]]

# Neighbour order matters: BFS ties resolve up, down, left, right.
NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def empty_wall_grid() -> Grid:
    """Return a fresh ROWS×COLS grid filled with walls."""
    return [[WALL for _ in range(COLS)] for _ in range(ROWS)]


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < ROWS and 0 <= c < COLS


def interior_cells() -> Iterator[RC]:
    # Row-major over 1..ROWS-2 × 1..COLS-2
    for r in range(1, ROWS - 1):
        for c in range(1, COLS - 1):
            yield (r, c)


def find_tiles(grid: Grid, tile: int) -> List[RC]:
    return [(r, c) for r, row in enumerate(grid) for c, t in enumerate(row) if t == tile]


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def to_ascii(grid: Grid) -> str:
    return "\n".join("".join(GLYPHS.get(t, "?") for t in row) for row in grid)


def from_ascii(text: str) -> Grid:
    """Inverse of to_ascii. Short rows / missing rows are padded with walls."""
    lookup = {g: t for t, g in GLYPHS.items()}
    grid = empty_wall_grid()
    lines = text.strip("\n").splitlines()
    if len(lines) > ROWS or any(len(ln) > COLS for ln in lines):
        raise ValueError(f"ascii grid larger than {ROWS}x{COLS}")
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            if ch not in lookup:
                raise ValueError(f"unknown glyph {ch!r} at ({r}, {c})")
            grid[r][c] = lookup[ch]
    return grid
