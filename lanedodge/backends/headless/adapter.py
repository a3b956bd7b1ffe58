from __future__ import annotations

from dataclasses import dataclass

from lanedodge.backends.headless.input import QueuedInputSource
from lanedodge.backends.headless.render import RecordingRenderer
from lanedodge.config.schema import GameSettings
from lanedodge.core.timer import ManualTimer


@dataclass
class HeadlessSurface:
    width: int
    height: int

    def get_size(self) -> tuple[int, int]:
        return (self.width, self.height)


class HeadlessBackend:
    name = "headless"
    interactive = False

    def __init__(self) -> None:
        self._surfaces: dict[str, HeadlessSurface] = {}

    def provide(self, container_id: str, size: tuple[int, int]) -> HeadlessSurface:
        # An existing container keeps its original size.
        surface = self._surfaces.get(container_id)
        if surface is None:
            surface = HeadlessSurface(*size)
            self._surfaces[container_id] = surface
        return surface

    def make_renderer(self, surface) -> RecordingRenderer:
        return RecordingRenderer()

    def make_input(self) -> QueuedInputSource:
        return QueuedInputSource()

    def make_timer(self, settings: GameSettings) -> ManualTimer:
        return ManualTimer()
