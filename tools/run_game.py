# tools/run_game.py
# Pygame runtime for the daily maze: keyboard input, light radius, popups,
# enemy pursuit on the session's 100 ms cadence, and the once-per-day lock.
# One loop drives both input and GameSession.tick(), so the session is never
# touched from two places at once.

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pygame

# Project imports
try:
    from seanle import daily
    from seanle.config import ROWS, COLS, state_path
    from seanle.engine.state import GameSession, Outcome
    from seanle.mapgen.placement import GenerationExhausted
    from seanle.render.tileset import Tileset
    from seanle.ui.share import end_text, heading, share_text
    from seanle.ui.status_bar import StatusBarState, render_status_bar
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

KEYMAP = {
    pygame.K_UP: (-1, 0), pygame.K_w: (-1, 0),
    pygame.K_DOWN: (1, 0), pygame.K_s: (1, 0),
    pygame.K_LEFT: (0, -1), pygame.K_a: (0, -1),
    pygame.K_RIGHT: (0, 1), pygame.K_d: (0, 1),
}

POPUP_TEXT = {
    "trap": "You fell into a trap!",
    "time": "-5 Seconds!",
    "summoned": "Sean has been summoned!",
}

RULES_TEXT = [
    "Collect S, E, A and N as fast as you can.",
    "Traps send you back to the start; clocks take 5 seconds off.",
    "After the third letter, Sean comes for you.",
    "Press ENTER to start.",
]

COPY_HINT = "Press C to copy your result."

KEY_REPEAT_DELAY_MS = 200
KEY_REPEAT_INTERVAL_MS = 100

def enable_key_repeat() -> None:
    # Held arrows keep walking, like browser key repeat.
    pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)


def handle_play_key(session: GameSession, key: int, debug: bool = False) -> bool:
    """Movement keys, plus F2 (summon Sean) when debugging. True if the key was used."""
    if key in KEYMAP:
        session.move(*KEYMAP[key])
        return True
    if debug and key == pygame.K_F2 and session.running:
        session.activate_enemy()
        return True
    return False


PLAYER_COLOR = (255, 255, 0)
ENEMY_COLOR = (255, 0, 0)


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Daily Seanle runtime")
    parser.add_argument("--seed", type=int, default=None, help="puzzle number (defaults to today's)")
    parser.add_argument("--tile", type=int, default=32, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--state", type=str, default=None, help="daily result file (default $SEANLE_STATE_PATH or ~/.seanle.json)")
    parser.add_argument("--ignore-lock", action="store_true", help="play even if today's puzzle was already played")
    parser.add_argument("--reset", action="store_true", help="forget today's result before starting")
    parser.add_argument("--debug", action="store_true", help="enable F2 to summon Sean early")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # Day number is recomputed on every launch
    day = args.seed if args.seed is not None else daily.day_index()
    store = daily.JsonFileStore(args.state or state_path())
    if args.reset:
        daily.reset(store)
    status = daily.daily_status(store)
    locked = status.played_today and not args.ignore_lock

    try:
        session = GameSession(day)
    except GenerationExhausted as e:
        print(f"[run_game] Could not build today's puzzle (#{day}): {e}")
        return 2

    end_lines: List[str] = []
    if locked:
        end_lines = [end_text(status.result, status.game_time)]
        if status.result in ("win", "lose"):
            end_lines.append(COPY_HINT)

    def on_outcome(outcome: Outcome) -> None:
        daily.record_result(store, outcome.won, outcome.elapsed)
        end_lines[:] = [
            end_text("win" if outcome.won else "lose", outcome.elapsed),
            COPY_HINT,
        ]

    session.add_listener(on_outcome)

    if not pygame.get_init():
        pygame.init()
    if not pygame.font.get_init():
        pygame.font.init()
    enable_key_repeat()

    t = args.tile
    hud_h = max(20, t)
    screen = pygame.display.set_mode((COLS * t, ROWS * t + hud_h))
    pygame.display.set_caption(heading(day))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, max(16, t * 2 // 3))

    tileset = Tileset(t)
    tileset.preload()  # every image is in memory before the first frame

    def draw_text_box(lines: List[str], y_center: int) -> None:
        surfs = [font.render(ln, True, (255, 255, 255)) for ln in lines]
        w = max(s.get_width() for s in surfs) + 20
        h = sum(s.get_height() for s in surfs) + 20
        box = pygame.Rect(0, 0, w, h)
        box.center = (COLS * t // 2, y_center)
        pygame.draw.rect(screen, (0, 0, 0), box)
        pygame.draw.rect(screen, (255, 255, 255), box, 2)
        y = box.y + 10
        for s in surfs:
            screen.blit(s, (box.centerx - s.get_width() // 2, y))
            y += s.get_height()

    def share_message() -> str:
        if session.outcome is not None:
            o = session.outcome
            return share_text(o.day_index, o.won, o.elapsed)
        if status.result in ("win", "lose"):
            return share_text(day, status.result == "win", float(status.game_time or 0))
        return ""

    showing_rules = not locked
    running = True

    # ---------- Main loop ----------
    while running:
        dt = clock.tick(args.fps) / 1000.0

        # --- Input ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                session.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    session.stop()
                elif showing_rules and event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    showing_rules = False
                    session.start()
                elif event.key == pygame.K_c and end_lines:
                    msg = share_message()
                    if msg and end_lines[-1] == COPY_HINT:
                        print(msg)
                        end_lines[-1] = "Copied to terminal!"
                else:
                    handle_play_key(session, event.key, debug=args.debug)

        # --- Time + pursuit ---
        session.tick(dt)

        # --- Rendering ---
        snap = session.snapshot()
        lit = session.visible_cells()
        screen.fill((0, 0, 0))
        for r in range(ROWS):
            for c in range(COLS):
                if (r, c) in lit:
                    screen.blit(tileset.get(snap.grid[r][c]), (c * t, r * t))

        pr, pc = snap.player
        pygame.draw.rect(screen, PLAYER_COLOR, pygame.Rect(pc * t + 8, pr * t + 8, t - 16, t - 16))
        if snap.enemy_active:
            er, ec = snap.enemy
            pygame.draw.rect(screen, ENEMY_COLOR, pygame.Rect(ec * t + 8, er * t + 8, t - 16, t - 16))

        popups = [POPUP_TEXT[k] for k in POPUP_TEXT if session.popups.visible(k)]
        if popups:
            draw_text_box(popups, ROWS * t // 4)
        if showing_rules:
            draw_text_box([heading(day)] + RULES_TEXT, ROWS * t // 2)
        elif end_lines:
            draw_text_box(end_lines, ROWS * t // 2)

        render_status_bar(screen, (0, ROWS * t), COLS * t, hud_h,
                          StatusBarState(day=day, elapsed=snap.elapsed, letters=snap.letters))
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
