# Player movement + on-enter effects on small hand-built boards.
import pytest

from seanle.engine.collisions import is_passable, on_enter_player
from seanle.engine.player import Player
from seanle.grid import copy_grid, from_ascii
from seanle.tiles import FLOOR, TRAP, TIME_BONUS, KEY, CRACK_WALL, LETTER_S

# Row 1 corridor: start at (1,1), trap at (1,3), bonuses at (1,5),(1,6), cracked wall at (1,8)
BOARD = """
####################
#..^.++k%SS........#
####################
"""


def make_player(elapsed=0.0):
    g = from_ascii(BOARD)
    p = Player(grid=g, start=(1, 1), elapsed=elapsed)
    return g, p


def walk(p, n, dr=0, dc=1):
    for _ in range(n):
        p.try_move(dr, dc)


def test_blocked_move_changes_nothing():
    g, p = make_player(elapsed=3.0)
    before = copy_grid(g)
    for _ in range(3):
        ev = p.try_move(-1, 0)
        assert ev == {"moved": False}
    assert p.pos == (1, 1) and p.elapsed == 3.0 and p.letters == []
    assert g == before


def test_out_of_bounds_is_ignored():
    g = from_ascii(".\n")
    p = Player(grid=g, start=(0, 0))
    assert p.try_move(-1, 0)["moved"] is False
    assert p.try_move(0, -1)["moved"] is False
    assert p.pos == (0, 0)


def test_non_unit_direction_rejected():
    _, p = make_player()
    with pytest.raises(ValueError):
        p.try_move(1, 1)


def test_trap_sends_player_home_and_disappears():
    g, p = make_player()
    walk(p, 2)
    assert p.pos == (1, 1)
    assert g[1][3] == FLOOR
    # Same route again: the trap is gone
    walk(p, 2)
    assert p.pos == (1, 3)


def test_time_bonus_never_goes_negative():
    g, p = make_player(elapsed=7.0)
    g[1][3] = FLOOR
    walk(p, 4)           # first bonus at (1,5)
    assert p.elapsed == 2.0
    assert g[1][5] == FLOOR
    p.try_move(0, 1)     # second bonus
    assert p.elapsed == 0.0
    assert g[1][6] == FLOOR


def test_key_is_consumed():
    g, p = make_player()
    g[1][3] = FLOOR
    walk(p, 6)
    assert p.pos == (1, 7)
    assert g[1][7] == FLOOR


def test_player_walks_over_cracked_walls():
    g, p = make_player()
    g[1][3] = FLOOR
    walk(p, 7)
    assert p.pos == (1, 8)
    assert g[1][8] == CRACK_WALL


def test_duplicate_letter_is_not_collected_twice():
    g, p = make_player()
    g[1][3] = FLOOR
    walk(p, 7)
    ev = p.try_move(0, 1)
    assert ev["letter"] == "S" and ev["new_letter"] == "S"
    ev = p.try_move(0, 1)
    assert ev["letter"] == "S" and ev["new_letter"] is None
    assert p.letters == ["S"]
    assert g[1][9] == FLOOR and g[1][10] == FLOOR


def test_on_enter_reports_and_consumes():
    g = from_ascii(BOARD)
    assert on_enter_player(g, 1, 3)["trap"] is True
    assert on_enter_player(g, 1, 5)["time_bonus"] is True
    assert on_enter_player(g, 1, 7)["key"] is True
    assert on_enter_player(g, 1, 9)["letter"] == "S"
    for c in (3, 5, 7, 9):
        assert g[1][c] == FLOOR
    # Floor: no flags
    ev = on_enter_player(g, 1, 1)
    assert not ev["trap"] and not ev["time_bonus"] and not ev["key"] and ev["letter"] is None


def test_is_passable_by_actor():
    g = from_ascii(BOARD)
    assert is_passable("player", g, 1, 8)
    assert not is_passable("enemy", g, 1, 8)
    assert not is_passable("player", g, 0, 0)
    assert not is_passable("enemy", g, -1, 0)
    with pytest.raises(ValueError):
        is_passable("ghost", g, 1, 1)
    assert g[1][3] == TRAP and g[1][5] == TIME_BONUS and g[1][7] == KEY and g[1][9] == LETTER_S
