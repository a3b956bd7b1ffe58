from __future__ import annotations

"""Headless simulation runner: plays seeded games with an autopilot."""

import time
from typing import Any

import numpy as np

from game_engine import Command, GameSession, LANE_COUNT, Phase
from lanedodge.backends.registry import load_backend
from lanedodge.config.schema import GameSettings
from lanedodge.core.results import build_summary, save_summary_json
from lanedodge.core.session import SessionManager


class AutopilotPolicy:
    """Steers toward the adjacent lane with the most clearance once the current lane gets tight."""

    def __init__(self, *, danger: float = 0.35, decision_interval: int = 5) -> None:
        self.danger = danger
        self.decision_interval = decision_interval

    def decide(self, session: GameSession) -> Command | None:
        lane = session.player.lane
        distances = session.nearest_obstacles()
        if distances[lane] > self.danger:
            return None

        candidates = [l for l in (lane - 1, lane, lane + 1) if 0 <= l < LANE_COUNT]
        best = max(candidates, key=lambda l: (distances[l], -abs(l - lane)))
        if best < lane:
            return Command.MOVE_LEFT
        if best > lane:
            return Command.MOVE_RIGHT
        return None


def simulate(
    settings: GameSettings,
    seed: int = 0,
    *,
    max_ticks: int | None = None,
    policy: AutopilotPolicy | None = None,
) -> dict[str, Any]:
    """
    Run one headless game until the first crash or `max_ticks`.

    Returns:
        dict: {
            'seed': int,
            'alive_ticks': int (ticks survived),
            'score': int (obstacles passed),
            'crashed': bool,
            'final': GameSession.encode() of the last state,
        }
    """
    if max_ticks is None:
        max_ticks = settings.sim_max_ticks
    policy = policy or AutopilotPolicy()
    run_settings = settings.with_overrides(seed=seed, verbose=False)

    backend = load_backend(run_settings.backend)
    if backend.interactive:
        raise ValueError(f"Simulations need a non-interactive backend, got {backend.name!r}")
    input_source = backend.make_input()
    manager = SessionManager(
        run_settings,
        surfaces=backend,
        make_renderer=backend.make_renderer,
        input_source=input_source,
        make_timer=lambda: backend.make_timer(run_settings),
    )
    loop = manager.start()

    ticks = 0
    try:
        while loop.phase is Phase.RUNNING and ticks < max_ticks:
            if ticks % policy.decision_interval == 0:
                command = policy.decide(loop.session)
                if command is not None:
                    input_source.push(command)
                    input_source.flush()
            loop.timer.fire(1)
            ticks += 1
    finally:
        manager.close()

    return {
        "seed": seed,
        "alive_ticks": ticks,
        "score": loop.session.score,
        "crashed": loop.phase is Phase.GAME_OVER,
        "final": loop.session.encode(),
    }


def run_simulations(settings: GameSettings, *, n_sims: int | None = None) -> dict[str, Any]:
    """Run repeated seeded simulations and aggregate metrics."""
    if n_sims is None:
        n_sims = settings.sims
    if n_sims < 1:
        raise ValueError(f"n_sims must be >= 1, got {n_sims}")
    base_seed = settings.seed if settings.seed is not None else 0
    start = time.time()

    runs = [simulate(settings, seed=base_seed + i) for i in range(n_sims)]

    alive = [r["alive_ticks"] for r in runs]
    scores = [r["score"] for r in runs]
    if settings.verbose:
        print(f"[simulate] {n_sims} runs in {time.time() - start:.1f}s")

    return {
        "avg_alive": float(np.mean(alive)),
        "std_alive": float(np.std(alive)),
        "min_alive": int(np.min(alive)),
        "max_alive": int(np.max(alive)),
        "avg_score": float(np.mean(scores)),
        "std_score": float(np.std(scores)),
        "best_score": int(np.max(scores)),
        "crash_rate": float(np.mean([r["crashed"] for r in runs])),
        "runs": runs,
    }


def save_summary(settings: GameSettings, results: dict[str, Any]):
    summary = build_summary(settings.width, settings.height, results)
    return save_summary_json(settings.paths.sim_results, summary)
