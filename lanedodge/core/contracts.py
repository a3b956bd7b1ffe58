from __future__ import annotations

from typing import Callable, Protocol, Sequence

from game_engine import Command, Track, Vehicle

CommandHandler = Callable[[Command], None]
Unsubscribe = Callable[[], None]


class SurfaceUnavailableError(RuntimeError):
    """Raised when no drawable surface can be provisioned for a container."""


class Surface(Protocol):
    def get_size(self) -> tuple[int, int]: ...


class SurfaceProvider(Protocol):
    def provide(self, container_id: str, size: tuple[int, int]) -> Surface: ...


class Renderer(Protocol):
    def render_frame(self, player: Vehicle, obstacles: Sequence[Vehicle], track: Track) -> None: ...


class InputSource(Protocol):
    def subscribe(self, handler: CommandHandler) -> Unsubscribe: ...


class TickTimer(Protocol):
    running: bool

    def start(self, callback: Callable[[], None]) -> None: ...
    def stop(self) -> None: ...
