from __future__ import annotations

from typing import Protocol

from lanedodge.config.schema import GameSettings
from lanedodge.core.contracts import InputSource, Renderer, Surface, TickTimer


class DisplayBackend(Protocol):
    name: str
    interactive: bool

    def provide(self, container_id: str, size: tuple[int, int]) -> Surface: ...
    def make_renderer(self, surface: Surface) -> Renderer: ...
    def make_input(self) -> InputSource: ...
    def make_timer(self, settings: GameSettings) -> TickTimer: ...
