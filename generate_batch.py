#!/usr/bin/env python3
"""
Generate a batch of puzzles and summarize how many clues they kept.

Usage:
    python generate_batch.py 20
    python generate_batch.py 20 --seed 3 --no-budget
"""

import argparse
import os
import sys

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku_game.generator import FAILURE_BUDGET, generate


def main():
    """Generate puzzles and print the clue-count distribution."""
    parser = argparse.ArgumentParser(description='Batch puzzle generation summary')
    parser.add_argument('count', type=int, nargs='?', default=10)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--no-budget', action='store_true',
                        help='Disable the early exit on rejected removals')
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    budget = None if args.no_budget else FAILURE_BUDGET

    print(f"Generating {args.count} puzzles")
    print("=" * 60)

    clues = []
    stops = {}
    for i in range(1, args.count + 1):
        puzzle = generate(rng, failure_budget=budget)
        report = puzzle.report
        clues.append(puzzle.clue_count)
        stops[report.stop_reason] = stops.get(report.stop_reason, 0) + 1
        print(f"[{i}/{args.count}] clues={puzzle.clue_count} "
              f"rejected={report.failed} stop={report.stop_reason}")

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"Clues: min={min(clues)} mean={np.mean(clues):.1f} max={max(clues)}")
    for reason, n in sorted(stops.items()):
        print(f"  {reason}: {n}/{args.count}")


if __name__ == '__main__':
    main()
