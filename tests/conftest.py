"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minehunter import Board, BoardConfig, Minefield, Shape


# ============================================================================
# Minefield Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator for reproducible mine placement."""
    return random.Random(1234)


@pytest.fixture
def scenario_field() -> Minefield:
    """3x4 field with mines at (1, 2) and (0, 0)."""
    return Minefield.build(Shape(3, 4), [(1, 2), (0, 0)])


@pytest.fixture
def centre_mine_field() -> Minefield:
    """5x5 field with a single mine in the centre."""
    return Minefield.build(Shape(5, 5), [(2, 2)])


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def centre_mine_board(centre_mine_field: Minefield) -> Board:
    """Board over the 5x5 single-mine field."""
    return Board(centre_mine_field)


@pytest.fixture
def empty_board() -> Board:
    """Board with no mines for cascade testing."""
    return Board(Minefield.build(Shape(5, 5), []))


@pytest.fixture
def corner_mines_board() -> Board:
    """
    4x4 board with mines in two corners.

    . . 1 M
    . . 1 1
    1 1 . .
    M 1 . .
    """
    return Board(Minefield.build(Shape(4, 4), [(0, 3), (3, 0)]))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """4x4 configuration with 2 mines."""
    return BoardConfig(4, 4, 2)
