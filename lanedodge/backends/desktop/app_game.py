from __future__ import annotations
"""
LANEDODGE — pygame host loop.
Three lanes, traffic keeps getting faster. ← → or A D to switch lanes,
SPACE to retry after a crash, ESC to quit.
"""

import pygame

from game_engine import Phase
from lanedodge.backends.registry import load_backend
from lanedodge.backends.desktop.render import draw_hud, load_fonts
from lanedodge.config.schema import GameSettings
from lanedodge.core.session import SessionManager

HOST_FPS = 120


def run(settings: GameSettings) -> int:
    """Play until the window is closed. Returns the best score of the process."""
    backend = load_backend(settings.backend)
    if not backend.interactive:
        raise ValueError(f"The game window needs an interactive backend, got {backend.name!r}")
    input_source = backend.make_input()
    manager = SessionManager(
        settings,
        surfaces=backend,
        make_renderer=backend.make_renderer,
        input_source=input_source,
        make_timer=lambda: backend.make_timer(settings),
    )
    manager.start()
    screen = pygame.display.get_surface()
    fonts = load_fonts()
    clock = pygame.time.Clock()

    try:
        while not input_source.quit_requested:
            clock.tick(HOST_FPS)

            # ── Events (between ticks) ──
            input_source.poll()

            # ── Ticks ──
            ran = manager.pump()

            # ── Draw ──
            # No tick ran (or the run is over): redraw the current state so the
            # HUD is painted over a clean frame.
            session = manager.active.session
            if ran == 0 or session.phase is Phase.GAME_OVER:
                manager.active.renderer.render_frame(session.player, session.obstacles, manager.track)
            draw_hud(screen, fonts, session)
            pygame.display.flip()
    finally:
        manager.close()
        pygame.quit()
    return manager.high_score.value
