from __future__ import annotations

"""Process-level owner of the high score, the input subscription and the active game."""

import random
from typing import Callable

from game_engine import CollaboratorUnavailableError, Command, GameLoop, HighScore, Phase, Track
from lanedodge.config.schema import GameSettings
from lanedodge.core.contracts import (
    InputSource,
    Renderer,
    Surface,
    SurfaceProvider,
    SurfaceUnavailableError,
    TickTimer,
    Unsubscribe,
)


class SessionManager:
    """Creates game instances and routes input to whichever one is active.

    The input source is subscribed exactly once, on `start`, no matter how
    many restarts follow. A fresh `GameLoop` (and timer) is built for every
    instance; only the `HighScore` cell carries over.
    """

    def __init__(
        self,
        settings: GameSettings,
        *,
        surfaces: SurfaceProvider,
        make_renderer: Callable[[Surface], Renderer],
        input_source: InputSource,
        make_timer: Callable[[], TickTimer],
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings
        self.surfaces = surfaces
        self.make_renderer = make_renderer
        self.input_source = input_source
        self.make_timer = make_timer
        self.rng = rng or random.Random(settings.seed)
        self.high_score = HighScore()
        self.active: GameLoop | None = None
        self.track: Track | None = None
        self._renderer: Renderer | None = None
        self.games_started = 0
        self._unsubscribe: Unsubscribe | None = None

    def _log(self, msg: str) -> None:
        if self.settings.verbose:
            print(f"[session] {msg}", flush=True)

    def start(self) -> GameLoop:
        if self.input_source is None:
            raise CollaboratorUnavailableError("Cannot start a game without an input source")
        surface = self.surfaces.provide(self.settings.container_id, self.settings.dimensions)
        if surface is None:
            raise SurfaceUnavailableError(f"No drawable surface for container {self.settings.container_id!r}")
        self.track = Track.from_surface(surface)
        self._renderer = self.make_renderer(surface)
        if self._renderer is None:
            raise CollaboratorUnavailableError(f"No renderer for container {self.settings.container_id!r}")
        if self._unsubscribe is None:
            self._unsubscribe = self.input_source.subscribe(self.dispatch)
        try:
            return self._new_instance()
        except Exception:
            self._unsubscribe()
            self._unsubscribe = None
            raise

    def _new_instance(self) -> GameLoop:
        if self.active is not None:
            self.active.teardown()
        loop = GameLoop(
            self.track,
            self._renderer,
            self.make_timer(),
            self.high_score,
            rng=self.rng,
            verbose=self.settings.verbose,
        )
        loop.initialize()
        self.active = loop
        self.games_started += 1
        return loop

    def dispatch(self, command: Command) -> None:
        if self.active is None:
            return
        if self.active.handle_command(command):
            self._log(f"Restarting (best {self.high_score.value})")
            self._new_instance()

    def restart(self) -> GameLoop:
        """Same as a confirm command, for hosts that restart without input."""
        if self.active is None or self.active.phase is not Phase.GAME_OVER:
            raise RuntimeError("restart is only allowed after game over")
        return self._new_instance()

    def pump(self, now: float | None = None) -> int:
        """Drive the active instance's host-pumped timer. Returns ticks run."""
        if self.active is None:
            return 0
        return self.active.timer.pump(now)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self.active is not None:
            self.active.teardown()
