#!/usr/bin/env python3
"""
Pruning Benchmark Runner

Runs MiniMax and Alpha-Beta on the same random boards at several depths and
reports how many static evaluations pruning saves. Also runs the reference
suite first, as a sanity check.

Usage:
    python tools/run_benchmark.py [--depths 2,4,6] [--boards 50] [--seed 0] [--improved]
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from jumpy_engine.evaluation import BasicEvaluator, ImprovedEvaluator
from jumpy_engine.utils.testing import benchmark_pruning, random_board, run_reference_suite


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(depths: list[int], num_boards: int, seed: int, improved: bool = False) -> int:
    """
    Run the pruning benchmark.

    Args:
        depths: List of depths to test
        num_boards: Number of random boards per depth
        seed: Seed for the board generator
        improved: Use the Improved evaluator instead of the Basic one

    Returns:
        Exit code (1 if the reference suite failed or the engines disagreed)
    """
    suite = run_reference_suite(verbose=False)
    print(f"Reference suite: {suite['passed']}/{suite['total']} passed")

    rng = np.random.default_rng(seed)
    boards = [random_board(rng) for _ in range(num_boards)]
    evaluator = ImprovedEvaluator() if improved else BasicEvaluator()

    print("=" * 80)
    print("PRUNING BENCHMARK - Jumpy3 Engine")
    print("=" * 80)
    print(f"Evaluator: {evaluator!r}")
    print(f"Boards: {num_boards} (seed {seed})")
    print(f"Depths: {depths}")
    print("=" * 80)

    start_time = time.time()
    rows = benchmark_pruning(boards, depths, evaluator=evaluator)
    total_time = time.time() - start_time

    print()
    print(f"{'Depth':<8} {'MiniMax':>12} {'AlphaBeta':>12} {'Saved %':>9} {'MM Time':>10} {'AB Time':>10} {'Mismatch':>9}")
    print("-" * 80)
    for r in rows:
        saved = 100 * (1 - r['alphabeta_positions'] / r['minimax_positions']) if r['minimax_positions'] else 0
        print(
            f"{r['depth']:<8} {r['minimax_positions']:>12,} {r['alphabeta_positions']:>12,} "
            f"{saved:>8.1f}% {format_time(r['minimax_time']):>10} "
            f"{format_time(r['alphabeta_time']):>10} {r['mismatches']:>9}"
        )
    print("=" * 80)
    print(f"Total time: {format_time(total_time)}")

    failed = suite['failures'] or any(r['mismatches'] for r in rows)
    return 1 if failed else 0


def main():
    parser = argparse.ArgumentParser(description="Compare MiniMax and Alpha-Beta evaluation counts")
    parser.add_argument("--depths", type=str, default="2,4,6", help="Comma-separated depths")
    parser.add_argument("--boards", type=int, default=50, help="Random boards per depth")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--improved", action="store_true", help="Use the Improved evaluator")
    args = parser.parse_args()

    depths = [int(d) for d in args.depths.split(",")]
    sys.exit(run_benchmark(depths, args.boards, args.seed, args.improved))


if __name__ == "__main__":
    main()
