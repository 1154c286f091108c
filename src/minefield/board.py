"""
Board module for the mine-clearing engine.

Holds the row-major grid of cells together with the board metadata:
dimensions, mine budget, the mines-remaining counter and the turn counter.
Cells are only replaced through the placement and reveal engines.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, Hidden
from .errors import ConfigurationError


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 14

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        if self.num_mines > self.total_cells:
            raise ConfigurationError(
                f"Too many mines (max {self.total_cells})"
            )

    @property
    def total_cells(self) -> int:
        return self.width * self.height


# Preset difficulty levels
EASY = BoardConfig(5, 5, 4)
MEDIUM = BoardConfig(8, 8, 14)
HARD = BoardConfig(12, 12, 35)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
}


def get_difficulty(name: str) -> BoardConfig:
    """
    Look up a preset by name.

    Args:
        name: Difficulty name, case-insensitive.

    Returns:
        The matching board configuration.

    Raises:
        ConfigurationError: If no preset has that name.
    """
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        choices = ", ".join(DIFFICULTIES)
        raise ConfigurationError(
            f"Unknown difficulty {name!r} (choose from {choices})"
        ) from None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Grid of cells in row-major order (index = row * width + col).

    The mines-remaining counter starts at the mine budget and moves with
    flags, but never leaves the range [0, mine budget].
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _mines_remaining: int = 0
    _turn: int = 0
    _mines_laid: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self.setup()

    # ========================================================================
    # Setup (Low-level)
    # ========================================================================

    def setup(self) -> None:
        """Reset counters and fill the grid with empty hidden cells."""
        self._cells = [Hidden() for _ in range(self.config.total_cells)]
        self._mines_remaining = self.config.num_mines
        self._turn = 0
        self._mines_laid = False

    # ========================================================================
    # Indexing
    # ========================================================================

    def index_of(self, row: int, col: int) -> int:
        """
        Map a position to its cell index.

        Raises:
            IndexError: If the position is off the board.
        """
        if not self.is_valid_position(row, col):
            raise IndexError(
                f"Position ({row}, {col}) outside "
                f"{self.height}x{self.width} board"
            )
        return row * self.width + col

    def position_of(self, index: int) -> Tuple[int, int]:
        """Map a cell index back to (row, col)."""
        self._check_index(index)
        return divmod(index, self.width)

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def is_valid_index(self, index: int) -> bool:
        """Check if a cell index is on the board."""
        return 0 <= index < len(self._cells)

    def _check_index(self, index: int) -> None:
        if not self.is_valid_index(index):
            raise IndexError(f"Cell index {index} out of range")

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, index: int) -> Cell:
        """Get the cell at an index."""
        self._check_index(index)
        return self._cells[index]

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._cells[row * self.width + col]

    def set_cell(self, index: int, cell: Cell) -> None:
        """Replace the cell at an index."""
        self._check_index(index)
        self._cells[index] = cell

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def mine_indices(self) -> List[int]:
        """Indices of every cell holding a mine."""
        return [i for i, cell in enumerate(self._cells) if cell.has_mine]

    # ========================================================================
    # Counters
    # ========================================================================

    def mark_mines_laid(self) -> None:
        self._mines_laid = True

    def flag_added(self) -> None:
        """Account for a new flag; the counter stops at zero."""
        if self._mines_remaining > 0:
            self._mines_remaining -= 1

    def flag_removed(self) -> None:
        """Account for a removed flag; the counter stops at the budget."""
        if self._mines_remaining < self.mine_budget:
            self._mines_remaining += 1

    def advance_turn(self) -> None:
        self._turn += 1

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_budget(self) -> int:
        return self.config.num_mines

    @property
    def mines_remaining(self) -> int:
        return self._mines_remaining

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def mines_laid(self) -> bool:
        return self._mines_laid

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        values = [cell.to_observation() for cell in self._cells]
        return np.array(values, dtype=np.int8).reshape(
            self.height, self.width
        )
