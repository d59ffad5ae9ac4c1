#!/usr/bin/env python3
"""Exploration profiler.

Usage:
    python scripts/profile_exploration.py --steps 500 --seed 0
    python scripts/profile_exploration.py --steps 2000 --cprofile explore.prof

Walks the player along a square spiral so every step opens fresh frontier,
greedily taking coins from the cache under the player.

Reports:
    - Per-step timing statistics (min, max, p50, p95, p99)
    - Known cells and minted coins over time
    - Throughput (steps/sec)
    - Optional: cProfile dump
"""

from __future__ import annotations

import argparse
import cProfile
import io
import os
import pstats
import statistics
import sys
import time

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from geocoin.config import GameConfig
from geocoin.core.enums import Direction
from geocoin.engine.session import GameSession

_SPIRAL = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


def _spiral(steps: int):
    """Yield directions tracing an outward square spiral: 1,1,2,2,3,3,..."""
    emitted = 0
    run = 1
    turn = 0
    while emitted < steps:
        for _ in range(2):
            direction = _SPIRAL[turn % 4]
            for _ in range(run):
                if emitted >= steps:
                    return
                yield direction
                emitted += 1
            turn += 1
        run += 1


def _run_walk(cfg: GameConfig, num_steps: int) -> dict:
    """Walk the spiral and collect per-step timing data."""
    session = GameSession(cfg)
    step_times: list[float] = []
    known_counts: list[int] = []
    taken = 0

    for direction in _spiral(num_steps):
        t_start = time.perf_counter()
        session.move(direction)
        i, j = session.player_indices
        if session.board.is_known(i, j):
            cell = session.cache_at(i, j)
            while session.ledger.count(cell):
                session.take(i, j)
                taken += 1
        step_times.append(time.perf_counter() - t_start)
        known_counts.append(len(session.board))

    return {
        "step_times": step_times,
        "known_counts": known_counts,
        "minted": session.ledger.total_minted(),
        "taken": taken,
        "conserved": session.transfer.total_coins() == session.ledger.total_minted(),
    }


def _step_percentiles(step_times: list[float]) -> tuple[float, float, float]:
    """Return (p50, p95, p99) of the step times, interpolated between samples."""
    if not step_times:
        return 0.0, 0.0, 0.0
    if len(step_times) == 1:
        return step_times[0], step_times[0], step_times[0]
    cuts = statistics.quantiles(step_times, n=100, method="inclusive")
    return cuts[49], cuts[94], cuts[98]


def _print_report(data: dict, wall_time: float) -> None:
    step_times = data["step_times"]
    known_counts = data["known_counts"]
    num_steps = len(step_times)

    if num_steps == 0:
        print("No steps executed.")
        return

    print("\n" + "=" * 70)
    print("  EXPLORATION PERFORMANCE REPORT")
    print("=" * 70)

    print(f"\n  Steps executed:    {num_steps}")
    print(f"  Wall clock time:   {wall_time:.3f}s")
    print(f"  Throughput:        {num_steps / wall_time:.1f} steps/sec")

    print(f"\n  Known cells (end): {known_counts[-1]}")
    print(f"  Coins minted:      {data['minted']}")
    print(f"  Coins taken:       {data['taken']}")
    print(f"  Conservation:      {'ok' if data['conserved'] else 'VIOLATED'}")

    print(f"\n  {'Metric':<16} {'Time (ms)':>10}")
    print(f"  {'-' * 16} {'-' * 10}")
    print(f"  {'Min':<16} {min(step_times) * 1000:>10.3f}")
    p50, p95, p99 = _step_percentiles(step_times)
    print(f"  {'P50 (median)':<16} {p50 * 1000:>10.3f}")
    print(f"  {'P95':<16} {p95 * 1000:>10.3f}")
    print(f"  {'P99':<16} {p99 * 1000:>10.3f}")
    print(f"  {'Max':<16} {max(step_times) * 1000:>10.3f}")
    if num_steps > 1:
        print(f"  {'StdDev':<16} {statistics.stdev(step_times) * 1000:>10.3f}")

    print("\n" + "=" * 70)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile cache spawning and coin transfers")
    parser.add_argument("--steps", type=int, default=500, help="Number of moves to make")
    parser.add_argument("--seed", type=int, default=0, help="World seed")
    parser.add_argument("--neighborhood", type=int, default=8, help="Spawn scan half-width")
    parser.add_argument("--cprofile", type=str, default=None, help="Save cProfile output to file")
    args = parser.parse_args()

    cfg = GameConfig(world_seed=args.seed, neighborhood_size=args.neighborhood)

    print(f"Profiling: {args.steps} steps, seed={args.seed}, neighborhood={args.neighborhood}")

    profiler = None
    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()

    wall_start = time.perf_counter()
    data = _run_walk(cfg, args.steps)
    wall_time = time.perf_counter() - wall_start

    if profiler:
        profiler.disable()

    _print_report(data, wall_time)

    if profiler and args.cprofile:
        profiler.dump_stats(args.cprofile)
        print(f"\n  cProfile data saved to: {args.cprofile}")
        print(f"  View with: python -m pstats {args.cprofile}")

        print(f"\n  Top 20 functions by cumulative time:")
        stream = io.StringIO()
        ps = pstats.Stats(profiler, stream=stream)
        ps.sort_stats("cumulative")
        ps.print_stats(20)
        print(stream.getvalue())


if __name__ == "__main__":
    main()
