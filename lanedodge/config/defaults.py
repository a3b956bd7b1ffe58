from __future__ import annotations

from pathlib import Path

import config as legacy_config

from .schema import GameSettings, Paths


def from_legacy_config() -> GameSettings:
    project_dir = Path(getattr(legacy_config, "PROJECT_DIR", Path(__file__).resolve().parents[2]))
    paths = Paths(
        project_dir=project_dir,
        results_dir=Path(legacy_config.RESULTS_DIR),
        sim_results=Path(legacy_config.SIM_RESULTS),
    )
    return GameSettings(
        paths=paths,
        width=int(getattr(legacy_config, "GAME_WIDTH", 800)),
        height=int(getattr(legacy_config, "GAME_HEIGHT", 600)),
        container_id=str(getattr(legacy_config, "CONTAINER_ID", "container")),
        backend=str(getattr(legacy_config, "DISPLAY_BACKEND", "pygame")),
        tick_period=float(getattr(legacy_config, "TICK_PERIOD", 0.01)),
        max_catchup_ticks=int(getattr(legacy_config, "MAX_CATCHUP_TICKS", 5)),
        sims=int(getattr(legacy_config, "SIMS", 20)),
        sim_max_ticks=int(getattr(legacy_config, "SIM_MAX_TICKS", 30_000)),
    )
