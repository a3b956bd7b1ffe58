from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from lanedodge.backends.registry import available_backends
from lanedodge.config.loader import load_settings


@dataclass(frozen=True)
class Check:
    name: str
    ok: bool
    detail: str


def _has_module(name: str) -> bool:
    return importlib.util.find_spec(name) is not None


def run_doctor(**overrides) -> list[Check]:
    """Check that settings built from `overrides` validate and the runtime deps are importable."""
    checks: list[Check] = []
    try:
        settings = load_settings(**overrides)
    except ValueError as exc:
        settings = None
        checks.append(Check("settings", False, str(exc)))
    else:
        checks.append(Check("settings", True, f"{settings.width}x{settings.height}, tick {settings.tick_period * 1000:.1f} ms"))
        checks.append(Check("backend", settings.backend in available_backends(), f"backend={settings.backend}"))
    checks.append(Check("pygame", _has_module("pygame"), "required for the game window and renderer"))
    checks.append(Check("numpy", _has_module("numpy"), "required for simulation summaries"))
    checks.append(Check("pytest", _has_module("pytest"), "optional, test suite"))
    if settings is not None:
        checks.append(Check("results_dir", settings.paths.results_dir.exists(), str(settings.paths.results_dir)))
    return checks
