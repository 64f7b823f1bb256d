from __future__ import annotations

import time

from lanerush.config.loader import load_settings
from lanerush.core.doctor import run_doctor
from lanerush.simulation.runner import run_simulations


def _settings_or_none(tag, **overrides):
    try:
        return load_settings(**overrides)
    except ValueError as exc:
        print(f"[{tag}] invalid settings: {exc}")
        return None


def cmd_play(args):
    from lanerush.ui.game.app import run

    settings = _settings_or_none("game", lane_count=args.lanes, width=args.width, height=args.height)
    if settings is None:
        return 1
    best = run(settings, seed=args.seed)
    print(f"[game] session best: {best}")
    return 0


def cmd_simulate(args):
    settings = _settings_or_none("simulate", lane_count=args.lanes, sim_workers=args.workers)
    if settings is None:
        return 1
    print("\n" + "=" * 50)
    print(f"SIMULATION: {args.autopilot} autopilot, {settings.lane_count} lanes")
    print("=" * 50)
    start = time.time()
    results = run_simulations(settings, args.autopilot, n_sims=args.runs, seed=args.seed)
    print(f"  Time: {time.time() - start:.1f}s")
    print(
        f"  avg = {results['avg_score']:.0f} points (+/- {results['std_score']:.0f}), "
        f"min = {results['min_score']}, max = {results['max_score']}"
    )
    print(
        f"  survived avg {results['avg_frames']:.0f} frames "
        f"({results['avg_frames'] / settings.fps:.1f}s), crash rate {results['crash_rate']:.0%}"
    )
    return 0


def cmd_doctor(args):
    settings = _settings_or_none("doctor", lane_count=args.lanes)
    if settings is None:
        return 1
    checks = run_doctor(settings)
    ok_count = 0
    for chk in checks:
        mark = "OK" if chk.ok else "FAIL"
        print(f"[{mark}] {chk.name}: {chk.detail}")
        ok_count += int(chk.ok)
    print(f"\n{ok_count}/{len(checks)} checks passing")
    return 0 if ok_count == len(checks) else 1
