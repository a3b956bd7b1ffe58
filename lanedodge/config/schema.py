from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal

BackendName = Literal["pygame", "headless"]


@dataclass(frozen=True)
class Paths:
    project_dir: Path
    results_dir: Path
    sim_results: Path

    def ensure_dirs(self) -> None:
        self.results_dir.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class GameSettings:
    """Runtime settings for one process.

    `width`/`height` are the requested surface size; the track uses whatever
    size the provisioned surface actually has.
    """

    paths: Paths
    width: int = 800
    height: int = 600
    container_id: str = "container"
    backend: BackendName = "pygame"
    tick_period: float = 0.01
    max_catchup_ticks: int = 5
    seed: int | None = None
    verbose: bool = True

    sims: int = 20
    sim_max_ticks: int = 30_000

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Game dimensions must be positive, got {self.width}x{self.height}")
        if self.tick_period <= 0:
            raise ValueError(f"tick_period must be > 0, got {self.tick_period}")
        if self.max_catchup_ticks < 1:
            raise ValueError(f"max_catchup_ticks must be >= 1, got {self.max_catchup_ticks}")
        if not self.container_id:
            raise ValueError("container_id must not be empty")
        if self.sims < 1 or self.sim_max_ticks < 1:
            raise ValueError("sims and sim_max_ticks must be >= 1")

    def with_overrides(self, **kwargs) -> "GameSettings":
        return replace(self, **kwargs)

    @property
    def dimensions(self) -> tuple[int, int]:
        return (self.width, self.height)
