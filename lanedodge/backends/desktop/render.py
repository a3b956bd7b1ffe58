from __future__ import annotations

"""pygame rendering for the LANEDODGE track, vehicles and HUD."""

from typing import Sequence

import pygame

from game_engine import Phase, Track, Vehicle

C_BG = (255, 255, 255)
C_LANE = (0, 0, 0)
C_HUD = (20, 20, 30)
C_DIM = (90, 90, 110)
C_OVERLAY = (0, 0, 0, 155)
C_TITLE = (0, 215, 255)
C_WHITE = (255, 255, 255)


def _rect(vehicle: Vehicle) -> pygame.Rect:
    return pygame.Rect(int(vehicle.x), int(vehicle.y), int(vehicle.width), int(vehicle.height))


class PygameRenderer:
    """Draws a full frame onto a surface. Holds no per-frame state."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def render_frame(self, player: Vehicle, obstacles: Sequence[Vehicle], track: Track) -> None:
        surf = self.surface
        surf.fill(C_BG)

        for x in track.divider_xs():
            pygame.draw.line(surf, C_LANE, (x, 0), (x, track.height))

        surf.fill(player.color, _rect(player))
        for o in obstacles:
            surf.fill(o.color, _rect(o))


def load_fonts() -> tuple[pygame.font.Font, pygame.font.Font, pygame.font.Font]:
    try:
        font_score = pygame.font.SysFont("Courier New", 28, bold=True)
        font_title = pygame.font.SysFont("Courier New", 52, bold=True)
        font_sub = pygame.font.SysFont("Courier New", 17)
    except Exception:
        font_score = pygame.font.SysFont(None, 28)
        font_title = pygame.font.SysFont(None, 52)
        font_sub = pygame.font.SysFont(None, 17)
    return font_score, font_title, font_sub


def draw_hud(screen: pygame.Surface, fonts, session) -> None:
    """Score/best in the corner; a dimmed GAME OVER card once the run ends."""
    font_score, font_title, font_sub = fonts
    width, height = screen.get_size()

    sc = font_score.render(f"{session.score:04d}", True, C_HUD)
    screen.blit(sc, (12, 10))
    best = font_score.render(f"BEST {session.high_score:04d}", True, C_HUD)
    screen.blit(best, (width - best.get_width() - 12, 10))

    if session.phase is not Phase.GAME_OVER:
        return

    dim = pygame.Surface((width, height), pygame.SRCALPHA)
    dim.fill(C_OVERLAY)
    screen.blit(dim, (0, 0))

    t = font_title.render("GAME OVER", True, C_TITLE)
    screen.blit(t, (width // 2 - t.get_width() // 2, height // 2 - 90))

    sc_txt = font_score.render(f"{session.score:04d}", True, C_WHITE)
    screen.blit(sc_txt, (width // 2 - sc_txt.get_width() // 2, height // 2 - 20))
    if session.score >= session.high_score and session.score > 0:
        nb = font_sub.render("new best", True, C_TITLE)
        screen.blit(nb, (width // 2 - nb.get_width() // 2, height // 2 + 22))

    h = font_sub.render("press SPACE to retry", True, C_WHITE)
    screen.blit(h, (width // 2 - h.get_width() // 2, height // 2 + 55))
