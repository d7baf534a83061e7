# tests/conftest.py
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to sys.path so "sudoku_game" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def puzzle_grid():
    return np.array([int(ch) for ch in PUZZLE], dtype=np.int8)


@pytest.fixture
def solution_grid():
    return np.array([int(ch) for ch in SOLUTION], dtype=np.int8)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
