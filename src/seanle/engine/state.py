# src/seanle/engine/state.py
# GameSession: owns grid, player, enemy, timers and the outcome for one play-through.
# All mutation happens through move() / tick() / pursuit_tick() on the thread that
# runs the game loop; nothing here is shared across threads.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Set, Tuple

from ..config import RULES, Rules, START_POS, ENEMY_SPAWN_LETTERS, WIN_LETTERS
from ..grid import Grid, copy_grid
from ..mapgen.generator import generate_level
from .enemy import Enemy, EnemyTickEvents, pursue
from .player import Player
from .timing import PopupTimers, PursuitClock

logger = logging.getLogger(__name__)

RC = Tuple[int, int]


@dataclass(frozen=True)
class Outcome:
    day_index: int
    won: bool
    elapsed: float


@dataclass(frozen=True)
class Snapshot:
    grid: Tuple[Tuple[int, ...], ...]
    player: RC
    letters: Tuple[str, ...]
    elapsed: float
    enemy: RC
    enemy_active: bool
    running: bool
    outcome: Optional[Outcome]


@dataclass
class TickOut:
    pursuit_ticks: int = 0
    enemy_moved: bool = False
    outcome: Optional[Outcome] = None


def visible_cells(center: RC, radius: int, rows: int, cols: int) -> Set[RC]:
    """Cells within Manhattan distance `radius` of `center`."""
    cr, cc = center
    out: Set[RC] = set()
    for r in range(max(0, cr - radius), min(rows, cr + radius + 1)):
        span = radius - abs(r - cr)
        for c in range(max(0, cc - span), min(cols, cc + span + 1)):
            out.add((r, c))
    return out


class GameSession:
    def __init__(
        self,
        seed: int,
        *,
        rules: Rules = RULES,
        grid: Optional[Grid] = None,
        start: RC = START_POS,
    ) -> None:
        # `seed` doubles as the puzzle number.
        self.seed = seed
        self.rules = rules
        self.start_pos = start
        self._template = copy_grid(grid) if grid is not None else None
        self._listeners: List[Callable[[Outcome], None]] = []
        self.reset()

    # ---- Lifecycle ----
    def reset(self) -> None:
        """Rebuild today's maze from the seed and put everyone back at the start."""
        if self._template is not None:
            self.grid = copy_grid(self._template)
        else:
            self.grid = generate_level(self.seed, max_draws=self.rules.max_draws).grid

        self.player = Player(grid=self.grid, start=self.start_pos,
                             bonus_seconds=self.rules.time_bonus_seconds)
        self.enemy = Enemy()
        self.clock = PursuitClock(interval_ms=self.rules.enemy_interval_ms)
        self.popups = PopupTimers()
        self.running = False
        self.outcome: Optional[Outcome] = None

    def start(self) -> None:
        if self.outcome is not None:
            return
        self.running = True
        self.clock.reset()
        logger.info("session #%d started", self.seed)

    def stop(self) -> None:
        """Freeze the session without recording an outcome."""
        if self.running:
            logger.info("session #%d stopped", self.seed)
        self.running = False

    def add_listener(self, fn: Callable[[Outcome], None]) -> None:
        self._listeners.append(fn)

    def _end(self, won: bool) -> None:
        if self.outcome is not None:
            return
        self.running = False
        self.popups.hide_all()
        self.outcome = Outcome(day_index=self.seed, won=won, elapsed=self.player.elapsed)
        logger.info("session #%d ended: %s in %.2fs", self.seed, "win" if won else "loss", self.player.elapsed)
        for fn in self._listeners:
            fn(self.outcome)

    # ---- Input ----
    def move(self, dr: int, dc: int) -> bool:
        """Movement intent. Returns True when the player actually moved."""
        if not self.running:
            return False
        ev = self.player.try_move(dr, dc)
        if not ev["moved"]:
            return False

        if ev["time_bonus"]:
            self.popups.show("time")
        if ev["trap"]:
            self.popups.show("trap")
        if ev["new_letter"]:
            n = len(self.player.letters)
            if n == ENEMY_SPAWN_LETTERS and not self.enemy.active:
                self.activate_enemy()
            if n == WIN_LETTERS:
                self._end(won=True)
        return True

    def activate_enemy(self) -> None:
        if self.enemy.active:
            return
        self.enemy.spawn(self.grid, self.start_pos)
        self.popups.show("summoned")
        logger.info("enemy spawned at %s", self.enemy.pos)

    # ---- Time ----
    def tick(self, dt: float) -> TickOut:
        """Advance real time by dt seconds: clock, popups and any due pursuit ticks."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        out = TickOut()
        if not self.running:
            return out

        self.player.add_time(dt)
        self.popups.tick(dt)

        for _ in range(self.clock.advance(dt)):
            if not self.running or not self.enemy.active:
                break
            out.pursuit_ticks += 1
            ev = self.pursuit_tick()
            out.enemy_moved = out.enemy_moved or ev.moved

        out.outcome = self.outcome
        return out

    def pursuit_tick(self) -> EnemyTickEvents:
        if not self.running or not self.enemy.active:
            return EnemyTickEvents()
        ev = pursue(self.enemy, self.grid, self.player.pos)
        if not ev.path_found:
            logger.debug("no path from %s to %s; holding", self.enemy.pos, self.player.pos)
        if ev.player_hit:
            self._end(won=False)
        return ev

    # ---- Read-only views ----
    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid=tuple(tuple(row) for row in self.grid),
            player=self.player.pos,
            letters=tuple(self.player.letters),
            elapsed=self.player.elapsed,
            enemy=self.enemy.pos,
            enemy_active=self.enemy.active,
            running=self.running,
            outcome=self.outcome,
        )

    def visible_cells(self) -> Set[RC]:
        rows = len(self.grid)
        cols = len(self.grid[0]) if rows else 0
        return visible_cells(self.player.pos, self.rules.light_radius, rows, cols)
