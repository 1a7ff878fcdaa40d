# src/seanle/mapgen/generator.py
# Canonical level generator: one seed, one rng stream, carve → crack → place.

from dataclasses import dataclass
from typing import Tuple

from ..config import START_POS, PLACEMENT_MAX_DRAWS
from ..grid import Grid
from ..rng import LCGRandom
from .carve import carve_maze, crack_walls
from .placement import FeatureLayout, apply_all_placements


@dataclass
class Level:
    seed: int
    grid: Grid
    start: Tuple[int, int]
    features: FeatureLayout


def generate_level(seed: int, max_draws: int = PLACEMENT_MAX_DRAWS) -> Level:
    rng = LCGRandom(seed)

    grid = carve_maze(rng, START_POS)
    crack_walls(grid, rng)
    features = apply_all_placements(grid, rng, max_draws)
    return Level(seed=seed, grid=grid, start=START_POS, features=features)


def generate_grid(seed: int) -> Grid:
    return generate_level(seed).grid
