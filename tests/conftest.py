"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Game, Hidden, MEDIUM, place_mines_at


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with a 1-mine budget and no mines laid."""
    return Board(BoardConfig(3, 3, 1))


@pytest.fixture
def wide_board() -> Board:
    """Create a non-square 4-wide, 2-high board."""
    return Board(BoardConfig(4, 2, 2))


@pytest.fixture
def make_board() -> Callable[[int, int, Iterable[int]], Board]:
    """Factory for boards with mines at fixed indices."""
    def _make(width: int, height: int, mines: Iterable[int]) -> Board:
        mines = list(mines)
        board = Board(BoardConfig(width, height, len(mines)))
        place_mines_at(board, mines)
        return board

    return _make


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def medium_game() -> Game:
    """Create a seeded medium game (8x8, 14 mines)."""
    return Game(MEDIUM, seed=42)


@pytest.fixture
def corner_mine_game() -> Game:
    """3x3 game with a single mine in the bottom-right corner."""
    return Game.with_mines(3, 3, [8])


@pytest.fixture
def center_mine_game() -> Game:
    """3x3 game with a single mine in the centre."""
    return Game.with_mines(3, 3, [4])


@pytest.fixture
def pair_game() -> Game:
    """2x1 game with the mine on the right."""
    return Game.with_mines(2, 1, [1])


@pytest.fixture
def empty_game() -> Game:
    """5x5 game with no mines for cascade testing."""
    return Game.with_mines(5, 5, [])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Hidden:
    """Create a hidden, unflagged, safe cell."""
    return Hidden()


@pytest.fixture
def mine_cell() -> Hidden:
    """Create a hidden cell containing a mine."""
    return Hidden(has_mine=True)
