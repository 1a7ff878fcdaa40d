# Canonical tile kinds. Values are stable: TSV dumps and goldens store them as-is.

WALL = 0
FLOOR = 1
CRACK_WALL = 2
TRAP = 3
KEY = 4
TIME_BONUS = 5
LETTER_S = 6
LETTER_E = 7
LETTER_A = 8
LETTER_N = 9

LETTERS = (LETTER_S, LETTER_E, LETTER_A, LETTER_N)
LETTER_CHARS = {LETTER_S: "S", LETTER_E: "E", LETTER_A: "A", LETTER_N: "N"}

TILE_NAMES = {
    WALL: "wall",
    FLOOR: "floor",
    CRACK_WALL: "cracked wall",
    TRAP: "trap",
    KEY: "key",
    TIME_BONUS: "time bonus",
    LETTER_S: "letter S",
    LETTER_E: "letter E",
    LETTER_A: "letter A",
    LETTER_N: "letter N",
}

# One-character glyphs for ASCII dumps
GLYPHS = {
    WALL: "#",
    FLOOR: ".",
    CRACK_WALL: "%",
    TRAP: "^",
    KEY: "k",
    TIME_BONUS: "+",
    LETTER_S: "S",
    LETTER_E: "E",
    LETTER_A: "A",
    LETTER_N: "N",
}

# Player and enemy differ only on cracked walls.
PLAYER_PASSABLE = frozenset((FLOOR, CRACK_WALL, TRAP, KEY, TIME_BONUS) + LETTERS)
ENEMY_PASSABLE = frozenset((FLOOR, TRAP, KEY, TIME_BONUS) + LETTERS)

def is_letter(tile: int) -> bool:
    return tile in LETTER_CHARS

def passable_for_player(tile: int) -> bool:
    return tile in PLAYER_PASSABLE

def passable_for_enemy(tile: int) -> bool:
    return tile in ENEMY_PASSABLE
