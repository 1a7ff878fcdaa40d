from collections import deque

import pytest

from seanle.config import ROWS, COLS, START_POS, TRAP_COUNT, TIME_BONUS_COUNT
from seanle.grid import NEIGHBOURS, empty_wall_grid, find_tiles, in_bounds
from seanle.mapgen.carve import carve_maze, crack_walls, shuffled_directions, BASE_DIRECTIONS
from seanle.mapgen.generator import generate_grid, generate_level
from seanle.mapgen.placement import (
    GenerationExhausted, apply_all_placements, in_restricted_area, place_random_item,
)
from seanle.rng import LCGRandom
from seanle.tiles import (
    WALL, FLOOR, CRACK_WALL, TRAP, KEY, TIME_BONUS, LETTERS, LETTER_CHARS, passable_for_player,
)

SEEDS = (1, 2, 7, 100, 365, 1000)


def reachable_from(grid, start):
    seen = {start}
    q = deque([start])
    while q:
        r, c = q.popleft()
        for dr, dc in NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if in_bounds(nr, nc) and (nr, nc) not in seen and passable_for_player(grid[nr][nc]):
                seen.add((nr, nc))
                q.append((nr, nc))
    return seen


def test_carve_visits_start_first_and_opens_it():
    trace = []
    grid = carve_maze(LCGRandom(1), START_POS, trace=trace)
    assert trace[0] == (1, 1)
    assert grid[1][1] == FLOOR


def test_carve_reaches_every_room():
    trace = []
    carve_maze(LCGRandom(1), trace=trace)
    rooms = {(r, c) for r in range(1, ROWS, 2) for c in range(1, COLS, 2)}
    assert set(trace) == rooms
    assert len(trace) == len(rooms)


def test_carve_is_a_tree():
    # 100 rooms joined by exactly 99 opened walls
    grid = carve_maze(LCGRandom(3))
    floors = sum(1 for row in grid for t in row if t == FLOOR)
    assert floors == 100 + 99


def test_shuffle_uses_three_draws():
    a, b = LCGRandom(11), LCGRandom(11)
    dirs = shuffled_directions(a)
    assert sorted(dirs) == sorted(BASE_DIRECTIONS)
    for _ in range(3):
        b.next()
    assert a.state == b.state


def test_crack_pass_draws_once_per_interior_wall():
    grid = carve_maze(LCGRandom(5))
    walls = sum(1 for r in range(1, ROWS - 1) for c in range(1, COLS - 1) if grid[r][c] == WALL)
    a, b = LCGRandom(77), LCGRandom(77)
    crack_walls(grid, a)
    for _ in range(walls):
        b.next()
    assert a.state == b.state


def test_crack_pass_only_touches_interior_walls():
    grid = carve_maze(LCGRandom(5))
    before = [list(row) for row in grid]
    crack_walls(grid, LCGRandom(8), chance=1.0)
    for r in range(ROWS):
        for c in range(COLS):
            interior = 1 <= r <= ROWS - 2 and 1 <= c <= COLS - 2
            if before[r][c] == WALL and interior:
                assert grid[r][c] == CRACK_WALL
            else:
                assert grid[r][c] == before[r][c]


@pytest.mark.parametrize("seed", SEEDS)
def test_generation_is_deterministic(seed):
    a, b = generate_level(seed), generate_level(seed)
    assert a.grid == b.grid
    assert a.features == b.features

    ta, tb = [], []
    carve_maze(LCGRandom(seed), trace=ta)
    carve_maze(LCGRandom(seed), trace=tb)
    assert ta == tb


def test_different_seeds_differ():
    assert generate_grid(1) != generate_grid(2)


@pytest.mark.parametrize("seed", SEEDS)
def test_feature_counts_and_uniqueness(seed):
    level = generate_level(seed)
    g = level.grid
    assert len(find_tiles(g, TRAP)) == TRAP_COUNT
    assert len(find_tiles(g, TIME_BONUS)) == TIME_BONUS_COUNT
    assert find_tiles(g, KEY) == []
    for letter in LETTERS:
        cells = find_tiles(g, letter)
        assert len(cells) == 1
        assert level.features.letters[LETTER_CHARS[letter]] == cells[0]
    cells = level.features.all_cells()
    assert len(cells) == len(set(cells)) == TRAP_COUNT + TIME_BONUS_COUNT + 4


@pytest.mark.parametrize("seed", SEEDS)
def test_features_avoid_safe_zone(seed):
    level = generate_level(seed)
    for r, c in level.features.all_cells():
        assert not in_restricted_area(r, c)
        assert 1 <= r <= ROWS - 2 and 1 <= c <= COLS - 2
    assert level.grid[1][1] == FLOOR


@pytest.mark.parametrize("seed", SEEDS)
def test_everything_reachable_from_start(seed):
    g = generate_grid(seed)
    seen = reachable_from(g, START_POS)
    for r in range(ROWS):
        for c in range(COLS):
            if g[r][c] not in (WALL, CRACK_WALL):
                assert (r, c) in seen, f"({r}, {c}) unreachable for seed {seed}"


def test_placement_only_overwrites_floor():
    grid = empty_wall_grid()
    grid[10][10] = FLOOR
    assert place_random_item(grid, LCGRandom(3), TRAP, max_draws=100_000) == (10, 10)
    assert grid[10][10] == TRAP


def test_placement_exhaustion_raises():
    grid = empty_wall_grid()  # no floor anywhere
    with pytest.raises(GenerationExhausted) as exc:
        place_random_item(grid, LCGRandom(3), TRAP, max_draws=50)
    assert exc.value.draws == 50
    assert exc.value.tile == TRAP


def test_placement_ignores_floor_inside_safe_zone():
    grid = empty_wall_grid()
    for r in range(1, 6):
        for c in range(1, 6):
            grid[r][c] = FLOOR
    with pytest.raises(GenerationExhausted):
        apply_all_placements(grid, LCGRandom(4), max_draws=500)


def carve_recursive(rng, start=START_POS):
    # Plain recursive backtracker: shuffle on arrival, descend before the next direction.
    grid = empty_wall_grid()
    visited, trace = set(), []

    def visit(r, c):
        visited.add((r, c))
        grid[r][c] = FLOOR
        trace.append((r, c))
        for dr, dc in shuffled_directions(rng):
            nr, nc = r + 2 * dr, c + 2 * dc
            if in_bounds(nr, nc) and (nr, nc) not in visited:
                grid[r + dr][c + dc] = FLOOR
                visit(nr, nc)

    visit(*start)
    return grid, trace


@pytest.mark.parametrize("seed", SEEDS)
def test_explicit_stack_matches_recursive_carve(seed):
    a, b = LCGRandom(seed), LCGRandom(seed)
    trace = []
    grid = carve_maze(a, trace=trace)
    want_grid, want_trace = carve_recursive(b)
    assert grid == want_grid
    assert trace == want_trace
    assert a.state == b.state
