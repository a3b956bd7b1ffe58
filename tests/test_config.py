"""Tests for settings loading, backend registry and the CLI."""

import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from lanedodge.backends.registry import available_backends, load_backend
from lanedodge.config.loader import load_settings
from lanedodge.core.doctor import run_doctor
from lanedodge.ui.cli.main import build_parser, main


class TestSettings:
    def test_defaults(self):
        s = load_settings()
        assert s.dimensions == (800, 600)
        assert s.container_id == "container"
        assert s.tick_period == pytest.approx(0.01)

    def test_none_overrides_ignored(self):
        s = load_settings(width=None, height=None, seed=None)
        assert s.dimensions == (800, 600)

    def test_overrides(self):
        s = load_settings(width=320, height=240, seed=5)
        assert s.dimensions == (320, 240)
        assert s.seed == 5

    @pytest.mark.parametrize("field,value", [
        ("width", 0), ("height", -10), ("tick_period", 0), ("max_catchup_ticks", 0), ("container_id", ""),
    ])
    def test_validation(self, field, value):
        with pytest.raises(ValueError):
            load_settings(**{field: value})

    def test_frozen(self):
        s = load_settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.width = 100


class TestRegistry:
    def test_available(self):
        assert available_backends() == ["headless", "pygame"]

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            load_backend("vulkan")

    def test_headless_backend(self):
        backend = load_backend("headless")
        assert backend.name == "headless"
        assert not backend.interactive


class TestCli:
    def test_parser(self):
        args = build_parser().parse_args(["simulate", "--sims", "2", "--max-ticks", "100", "--seed", "3"])
        assert args.sims == 2
        assert args.max_ticks == 100
        assert args.seed == 3

    def test_simulate_command(self, capsys):
        main(["simulate", "--sims", "2", "--max-ticks", "100"])
        out = capsys.readouterr().out
        assert "AUTOPILOT" in out
        assert "crash rate" in out

    def test_doctor_command(self, capsys):
        main(["doctor", "--backend", "headless"])
        out = capsys.readouterr().out
        assert "[OK] backend" in out
        assert "checks passing" in out

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])


class TestDoctor:
    def test_valid_settings_pass(self):
        checks = {c.name: c for c in run_doctor(backend="headless")}
        assert checks["settings"].ok
        assert checks["backend"].ok

    def test_invalid_settings_fail(self):
        checks = {c.name: c for c in run_doctor(width=-5)}
        assert not checks["settings"].ok
        assert "dimensions" in checks["settings"].detail
        assert "backend" not in checks

    def test_doctor_command_reports_bad_dimensions(self, capsys):
        main(["doctor", "--width=0"])
        out = capsys.readouterr().out
        assert "[FAIL] settings" in out
