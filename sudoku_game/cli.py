"""
Sudoku Game - Command Line Module
"""

import argparse
import sys

import numpy as np

from .generator import FAILURE_BUDGET, MAX_TO_REMOVE, generate
from .grid import format_board, grid_to_string, parse_grid
from .solver import DEFAULT_MAX_STEPS, solve_puzzle
from .uniqueness import count_solutions


def run_generate(args) -> int:
    rng = np.random.default_rng(args.seed)
    budget = None if args.no_budget else args.failure_budget

    for n in range(1, args.count + 1):
        print(f"\n[{n}/{args.count}] Generating puzzle...")
        puzzle = generate(rng, max_to_remove=args.max_remove, failure_budget=budget)
        report = puzzle.report
        print(f"      Removed {report.removed} cells in {report.attempts} attempts "
              f"({report.failed} rejected, stopped: {report.stop_reason})")
        print(f"      Clues: {puzzle.clue_count}")
        print()
        print(format_board(puzzle.initial))
        print(f"\n{grid_to_string(puzzle.initial)}")
        if args.show_solution:
            print("\nSolution:")
            print(format_board(puzzle.solution))
    return 0


def run_solve(args) -> int:
    try:
        board = parse_grid(args.puzzle)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("\nPuzzle:")
    print(format_board(board))

    print("\n[1/2] Solving...")
    solved, reason = solve_puzzle(board, max_steps=args.max_steps)
    print(f"      {reason}")
    if solved is None:
        return 1

    print("\n[2/2] Checking uniqueness...")
    count = count_solutions(board)
    print("      Unique solution" if count == 1 else "      Multiple solutions exist")

    print("\nSolution:")
    print(format_board(solved))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Sudoku Game - puzzle generator and solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Generate a puzzle:
    python -m sudoku_game generate

  Generate three reproducible puzzles and show their solutions:
    python -m sudoku_game generate --seed 7 --count 3 --show-solution

  Solve a puzzle given as 81 characters (0 or . for empty):
    python -m sudoku_game solve 53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79
        """
    )
    sub = parser.add_subparsers(dest='command', required=True)

    gen = sub.add_parser('generate', help='Generate new puzzles')
    gen.add_argument('--seed', type=int, default=None,
                     help='Random seed for reproducible puzzles')
    gen.add_argument('--count', '-n', type=int, default=1,
                     help='Number of puzzles to generate (default: 1)')
    gen.add_argument('--max-remove', type=int, default=MAX_TO_REMOVE,
                     help=f'Maximum cells to empty (default: {MAX_TO_REMOVE})')
    gen.add_argument('--failure-budget', type=int, default=FAILURE_BUDGET,
                     help=f'Rejected removals before stopping early (default: {FAILURE_BUDGET})')
    gen.add_argument('--no-budget', action='store_true',
                     help='Ignore the failure budget and try every cell')
    gen.add_argument('--show-solution', action='store_true',
                     help='Print the solution under each puzzle')
    gen.set_defaults(func=run_generate)

    sol = sub.add_parser('solve', help='Solve a puzzle and check it is unique')
    sol.add_argument('puzzle', help='81-character puzzle string')
    sol.add_argument('--max-steps', type=int, default=DEFAULT_MAX_STEPS,
                     help=f'Search step limit (default: {DEFAULT_MAX_STEPS})')
    sol.set_defaults(func=run_solve)

    return parser


def main(argv=None):
    """
    Main entry point for the Sudoku Game command line.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, 'count', 1) < 1:
        print("Error: --count must be at least 1")
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == '__main__':
    main()
