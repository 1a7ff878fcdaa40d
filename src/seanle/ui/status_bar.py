from dataclasses import dataclass, field
from typing import Tuple

@dataclass
class StatusBarState:
    day: int = 0
    elapsed: float = 0.0                       # seconds
    letters: Tuple[str, ...] = field(default_factory=tuple)

def render_status_bar(screen, origin_xy: Tuple[int, int], width: int, height: int, state: StatusBarState) -> None:
    """
    Draw a one-row HUD: puzzle number, running time, and the S/E/A/N boxes
    (lit once collected). Does not touch the grid.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = pygame.font.SysFont(None, max(12, height * 2 // 3))

    def label(x, text, color=(220, 220, 220)):
        img = font.render(text, True, color)
        screen.blit(img, (ox + x, oy + (height - img.get_height()) // 2))
        return x + img.get_width() + height // 2

    x = height // 2
    x = label(x, f"#{state.day}")
    x = label(x, f"{state.elapsed:.2f}s")

    box = height - 6
    bx = width - 4 * (box + 4) - 4
    for ch in "SEAN":
        lit = ch in state.letters
        rect = pygame.Rect(ox + bx, oy + 3, box, box)
        pygame.draw.rect(screen, (255, 215, 0) if lit else (60, 60, 60), rect)
        img = font.render(ch, True, (0, 0, 0) if lit else (140, 140, 140))
        screen.blit(img, img.get_rect(center=rect.center))
        bx += box + 4
