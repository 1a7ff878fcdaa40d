from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Iterable, Optional, Tuple

from ..tiles import WALL, FLOOR, CRACK_WALL, TRAP, KEY, TIME_BONUS, LETTER_S, LETTER_E, LETTER_A, LETTER_N

ASSET_DIR = os.getenv("SEANLE_ASSET_DIR", "assets")

# Tiles that ship an image; everything else is drawn as a flat colour.
ASSET_FILES = {
    LETTER_S: "letter_s.png",
    LETTER_E: "letter_e.png",
    LETTER_A: "letter_a.png",
    LETTER_N: "letter_n.png",
    TIME_BONUS: "time_item.png",
    TRAP: "trap.png",
}

TILE_COLORS = {
    WALL: (68, 68, 68, 255),
    FLOOR: (204, 204, 204, 255),
    CRACK_WALL: (102, 102, 102, 255),
    TRAP: (136, 0, 0, 255),
    KEY: (255, 215, 0, 255),
    TIME_BONUS: (0, 255, 255, 255),
}

LETTER_GLYPH = {LETTER_S: "S", LETTER_E: "E", LETTER_A: "A", LETTER_N: "N"}

def fallback_color(tile_id: int) -> Tuple[int, int, int, int]:
    return TILE_COLORS.get(tile_id, (0, 0, 0, 255))

def asset_path(tile_id: int) -> Optional[str]:
    name = ASSET_FILES.get(tile_id)
    return os.path.join(ASSET_DIR, name) if name else None

class Tileset:
    """
    Tiny cached loader:
      - Letters, time bonus and trap load from ASSET_DIR when present
      - Anything missing becomes a flat colour (letters get their glyph)
      - Returns pygame.Surface of exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self.font = font or pygame.font.SysFont(None, max(10, tile_size // 2))

    def preload(self, tile_ids: Iterable[int] = tuple(ASSET_FILES)) -> int:
        # Load every image before the first frame; returns how many came from disk.
        return sum(1 for t in tile_ids if self._from_disk(t) is not None)

    @lru_cache(maxsize=64)
    def _from_disk(self, tile_id: int) -> Optional[pygame.Surface]:
        p = asset_path(tile_id)
        if p and os.path.exists(p):
            img = pygame.image.load(p).convert_alpha()
            return pygame.transform.scale(img, (self.tile_size, self.tile_size))
        return None

    @lru_cache(maxsize=64)
    def get(self, tile_id: int) -> pygame.Surface:
        img = self._from_disk(tile_id)
        if img is not None:
            return img
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(fallback_color(tile_id))
        glyph = LETTER_GLYPH.get(tile_id)
        if glyph:
            pygame.draw.rect(img, (255, 255, 255, 255), img.get_rect())
            txt = self.font.render(glyph, True, (0, 0, 0))
            img.blit(txt, txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2)))
        return img
