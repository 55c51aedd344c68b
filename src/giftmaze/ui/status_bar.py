from dataclasses import dataclass

from .hud import counter_digits, score_digits

@dataclass
class StatusBarState:
    score: int = 0
    pickups: int = 0
    ended: bool = False

    @classmethod
    def from_snapshot(cls, snap) -> "StatusBarState":
        return cls(score=snap.score, pickups=snap.pickups, ended=snap.ended)

def render_status_bar(screen, origin_xy: tuple[int, int], tile: int, width_cells: int, state: StatusBarState) -> None:
    """
    Draw a 1-tile-high status bar with the score and pickup counters.
    Does not touch the game state.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    w = max(1, width_cells) * tile
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, w, tile))
    font = pygame.font.SysFont(None, max(10, tile * 3 // 4))

    def label(x, text, color=(220, 220, 220)):
        img = font.render(text, True, color)
        screen.blit(img, (ox + x, oy + (tile - img.get_height()) // 2))
        return x + img.get_width() + (tile // 4)

    def digits(x, ds):
        return label(x, "".join(str(d) for d in ds), (255, 220, 0))

    x = tile // 4
    x = label(x, "SCORE"); x = digits(x, score_digits(state.score)); x += tile // 2
    x = label(x, "GIFTS"); x = digits(x, counter_digits(state.pickups, 3))
    if state.ended:
        x += tile // 2
        label(x, "OVER", (255, 80, 80))
