from __future__ import annotations

from lanedodge.config.schema import GameSettings
from lanedodge.core.contracts import SurfaceUnavailableError


class PygameBackend:
    name = "pygame"
    interactive = True

    def provide(self, container_id: str, size: tuple[int, int]):
        """Return the display surface, opening a window if none exists yet.

        An already-open window is reused as-is, so callers must read the
        size back from the returned surface.
        """
        import pygame

        try:
            if not pygame.get_init():
                pygame.init()
            surface = pygame.display.get_surface()
            if surface is None:
                surface = pygame.display.set_mode(size)
            pygame.display.set_caption(container_id)
        except pygame.error as exc:
            raise SurfaceUnavailableError(f"Could not open a display for {container_id!r}: {exc}") from exc
        return surface

    def make_renderer(self, surface):
        from lanedodge.backends.desktop.render import PygameRenderer

        return PygameRenderer(surface)

    def make_input(self):
        from lanedodge.backends.desktop.input import PygameInputSource

        return PygameInputSource()

    def make_timer(self, settings: GameSettings):
        from lanedodge.core.timer import FixedStepTimer

        return FixedStepTimer(settings.tick_period, max_catchup=settings.max_catchup_ticks)
