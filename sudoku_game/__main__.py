"""
Entry point for running the sudoku_game package.

Usage:
    python -m sudoku_game generate --seed 1
"""

from .cli import main

if __name__ == '__main__':
    main()
