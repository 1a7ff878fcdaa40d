import importlib.util
import os

import pytest

pygame = pytest.importorskip("pygame")

from seanle.engine.state import GameSession
from seanle.grid import from_ascii

RUN_GAME = os.path.join(os.path.dirname(__file__), os.pardir, "tools", "run_game.py")

CORRIDOR = """
####################
#..................#
####################
"""


@pytest.fixture(scope="module")
def run_game():
    spec = importlib.util.spec_from_file_location("run_game", RUN_GAME)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def started():
    s = GameSession(7, grid=from_ascii(CORRIDOR))
    s.start()
    return s


def test_key_repeat_is_enabled(run_game, monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.key, "set_repeat", lambda *a: calls.append(a))
    run_game.enable_key_repeat()
    assert len(calls) == 1
    delay, interval = calls[0]
    assert delay > 0 and interval > 0


def test_arrows_move_the_player(run_game):
    s = started()
    assert run_game.handle_play_key(s, pygame.K_RIGHT)
    assert run_game.handle_play_key(s, pygame.K_d)
    assert s.player.pos == (1, 3)


def test_f2_summons_only_in_debug(run_game):
    s = started()
    assert not run_game.handle_play_key(s, pygame.K_F2)
    assert not s.enemy.active
    assert run_game.handle_play_key(s, pygame.K_F2, debug=True)
    assert s.enemy.active and s.enemy.pos == (1, 1)
    assert s.popups.visible("summoned")


def test_f2_ignored_before_start(run_game):
    s = GameSession(7, grid=from_ascii(CORRIDOR))
    assert not run_game.handle_play_key(s, pygame.K_F2, debug=True)
    assert not s.enemy.active
