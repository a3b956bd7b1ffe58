from __future__ import annotations

from pathlib import Path

from lanedodge.config.loader import load_settings
from lanedodge.core.contracts import SurfaceUnavailableError
from lanedodge.core.doctor import run_doctor
from lanedodge.core.results import STAT_FIELDS, SummarySchemaError, load_summary_json


def _settings(args, **extra):
    return load_settings(width=args.width, height=args.height, seed=args.seed, **extra)


def cmd_play(args):
    tick_period = args.tick_ms / 1000 if args.tick_ms is not None else None
    settings = _settings(args, backend="pygame", container_id=args.container, tick_period=tick_period)

    from lanedodge.backends.desktop.app_game import run

    try:
        best = run(settings)
    except SurfaceUnavailableError as exc:
        print(f"[play] {exc}")
        raise SystemExit(1)
    print(f"Best score: {best}")


def cmd_simulate(args):
    settings = _settings(args, backend="headless", sims=args.sims, sim_max_ticks=args.max_ticks)

    from lanedodge.simulation.runner import run_simulations, save_summary

    results = run_simulations(settings)
    print("\n" + "=" * 50)
    print("  LANEDODGE AUTOPILOT — RESULTS")
    print("=" * 50)
    print(f"  avg alive: {results['avg_alive']:.0f} ticks (+/- {results['std_alive']:.0f})")
    print(f"  min/max alive: {results['min_alive']} / {results['max_alive']}")
    print(f"  avg score: {results['avg_score']:.2f} (best {results['best_score']})")
    print(f"  crash rate: {results['crash_rate']:.0%}")
    if args.save:
        settings.paths.ensure_dirs()
        path = save_summary(settings, results)
        print(f"\n  Saved: {path}")


def cmd_report(args):
    settings = _settings(args)
    path = Path(settings.paths.sim_results)
    if not path.exists():
        print(f"[report] Missing simulation results: {path}")
        return
    try:
        data = load_summary_json(path)
    except SummarySchemaError as exc:
        print(f"[report] {path}: {exc}")
        raise SystemExit(1)
    print(f"\nSIMULATION ({path})")
    print(f"  schema_version: {data['schema_version']}")
    print(f"  track: {data['width']}x{data['height']}")
    print(f"  runs: {len(data['scores'])}")
    for key in STAT_FIELDS:
        print(f"  {key}: {data[key]}")


def cmd_doctor(args):
    checks = run_doctor(width=args.width, height=args.height, seed=args.seed, backend=args.backend)
    ok_count = 0
    for chk in checks:
        mark = "OK" if chk.ok else "FAIL"
        print(f"[{mark}] {chk.name}: {chk.detail}")
        ok_count += int(chk.ok)
    print(f"\n{ok_count}/{len(checks)} checks passing")
