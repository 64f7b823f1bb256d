"""Headless simulation runner: one seeded run, or a batch across worker processes."""
from __future__ import annotations

import multiprocessing
import random
from itertools import islice
from typing import Any

import numpy as np

from lanerush.config.schema import GameSettings
from lanerush.engine import SimulationClock
from lanerush.simulation.autopilot import Autopilot, load_autopilot

# Decisions per second; the car keeps easing between decisions
DECISIONS_PER_SECOND = 8


def simulate(autopilot: Autopilot, seed: int = 0, settings: GameSettings | None = None) -> dict[str, Any]:
    """
    Run one headless game until the first collision or `max_frames`.

    Returns:
        dict: {
            'score': int,
            'distance': float,
            'frames': int (frames survived),
            'crashed': bool,
            'seed': int,
        }
    """
    clock = SimulationClock(settings, seed=seed)
    max_frames = clock.settings.max_frames
    decision_interval = max(1, clock.settings.fps // DECISIONS_PER_SECOND)

    clock.reset()
    while clock.is_active() and clock.run.frame < max_frames:
        if clock.run.frame % decision_interval == 0:
            d = autopilot.decide(clock)
            if d:
                clock.apply_lane_intent(d)
        clock.advance()

    return {
        "score": clock.current_score(),
        "distance": clock.run.distance,
        "frames": clock.run.frame,
        "crashed": not clock.is_active(),
        "seed": seed,
    }


def _run_seed_batch(args):
    """Worker function: build the autopilot once, run one chunk of seeds."""
    name, settings, seeds = args
    autopilot = load_autopilot(name)
    return [simulate(autopilot, seed=seed, settings=settings) for seed in seeds]


def _chunked(items, chunk_size):
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")
    it = iter(items)
    while True:
        chunk = list(islice(it, chunk_size))
        if not chunk:
            return
        yield chunk


def summarize(runs: list[dict[str, Any]]) -> dict[str, Any]:
    scores = [r["score"] for r in runs]
    frames = [r["frames"] for r in runs]
    return {
        "avg_score": float(np.mean(scores)),
        "std_score": float(np.std(scores)),
        "min_score": int(np.min(scores)),
        "max_score": int(np.max(scores)),
        "avg_frames": float(np.mean(frames)),
        "crash_rate": float(np.mean([r["crashed"] for r in runs])),
        "runs": runs,
    }


def run_simulations(
    settings: GameSettings,
    autopilot: str = "dodge",
    *,
    n_sims: int | None = None,
    batch_size: int | None = None,
    seed: int | None = None,
) -> dict[str, Any]:
    """Run repeated simulations for one autopilot and aggregate metrics."""
    load_autopilot(autopilot)  # fail fast on a bad name, before spawning workers
    n_sims = n_sims or settings.sims_per_run
    batch_size = batch_size or settings.batch_size

    all_runs: list[dict[str, Any]] = []
    seeds = random.Random(seed).sample(range(100_000), n_sims)
    n_batches = (n_sims + batch_size - 1) // batch_size

    for batch_idx in range(n_batches):
        batch_seeds = seeds[batch_idx * batch_size:(batch_idx + 1) * batch_size]

        worker_count = min(len(batch_seeds), settings.sim_workers)
        seeds_per_worker = max(1, (len(batch_seeds) + worker_count - 1) // worker_count)
        args_list = [
            (autopilot, settings, seed_chunk)
            for seed_chunk in _chunked(batch_seeds, seeds_per_worker)
        ]

        if worker_count == 1:
            batch_results = [_run_seed_batch(a) for a in args_list]
        else:
            with multiprocessing.Pool(processes=worker_count) as pool:
                batch_results = pool.map(_run_seed_batch, args_list)

        for worker_runs in batch_results:
            all_runs.extend(worker_runs)

        scores = [r["score"] for r in all_runs]
        print(
            f"  Batch {batch_idx + 1}/{n_batches} complete "
            f"({len(all_runs)}/{n_sims} runs, running avg: {sum(scores) / len(scores):.0f} points)"
        )

    return summarize(all_runs)
