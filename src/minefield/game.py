"""
Game module: the state machine wrapped around a board.

A Game is created Playing with its mines already laid, accepts reveal and
flag actions until the first mine is revealed (Lost) or every safe cell is
revealed (Won), and rejects everything after that.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig, get_difficulty
from .cell import CellView, Hidden, Revealed
from .errors import InvalidPhaseError, InvalidSelectionError
from .placement import place_mines, place_mines_at
from .reveal import Action, apply_action

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class Phase(Enum):
    """Possible phases of a game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class ActionResult:
    """
    Result of an accepted action.

    Attributes:
        action: The action applied.
        index: Target cell index.
        revealed: Indices that became Revealed, cascade included.
        hit_mine: Whether the action revealed a mine.
        phase: Game phase after the action.
    """

    action: Action
    index: int
    revealed: List[int] = field(default_factory=list)
    hit_mine: bool = False
    phase: Phase = Phase.PLAYING


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single mine-clearing session.

    The game owns its board; every mutation goes through reveal() and
    toggle_flag() (or apply()), each of which either completes fully or
    raises before touching any cell.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        mines: Optional[Iterable[int]] = None,
    ) -> None:
        """
        Set up the board and lay its mines.

        Args:
            config: Board configuration (default: medium, 8x8 with 14 mines).
            seed: Seed for the placement random source.
            rng: Explicit random source; takes precedence over seed.
            mines: Fixed mine indices instead of a random layout.
        """
        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self._phase = Phase.PLAYING
        self._selected: Optional[int] = None
        self._detonated: Optional[int] = None

        if mines is not None:
            place_mines_at(self.board, mines)
        else:
            place_mines(self.board, rng or random.Random(seed))

        logger.info("New %dx%d game with %d mines",
                    self.config.width, self.config.height,
                    self.config.num_mines)

    @classmethod
    def from_difficulty(cls, name: str, seed: Optional[int] = None) -> "Game":
        """Create a game from a preset name (easy, medium or hard)."""
        return cls(get_difficulty(name), seed=seed)

    @classmethod
    def with_mines(
        cls, width: int, height: int, mines: Iterable[int]
    ) -> "Game":
        """
        Create a game with mines at fixed indices.

        The mine budget is the number of distinct indices given.
        """
        mines = set(mines)
        return cls(BoardConfig(width, height, len(mines)), mines=mines)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def apply(
        self, row: int, col: int, action: Action, confirm: bool = False
    ) -> ActionResult:
        """
        Apply an action to the cell at (row, col).

        Args:
            row: 0-based row.
            col: 0-based column.
            action: Reveal or flag toggle.
            confirm: Must be True to reveal a flagged cell.

        Returns:
            Description of what changed.

        Raises:
            InvalidPhaseError: If the game is already over.
            InvalidSelectionError: If the position is off the board or the
                cell is already revealed.
            FlaggedCellError: If revealing a flagged cell without confirm.
        """
        if self._phase is not Phase.PLAYING:
            raise InvalidPhaseError(
                f"Game is {self._phase.name.lower()}; start a new game"
            )
        if not self.board.is_valid_position(row, col):
            raise InvalidSelectionError(
                f"Position ({row}, {col}) is off the board", row, col
            )

        index = self.board.index_of(row, col)
        outcome = apply_action(self.board, index, action, confirm)
        self._selected = index

        if outcome.hit_mine:
            self._detonated = index
            self._set_phase(Phase.LOST)
        elif self.check_win():
            self._set_phase(Phase.WON)

        return ActionResult(
            action=action,
            index=index,
            revealed=outcome.revealed,
            hit_mine=outcome.hit_mine,
            phase=self._phase,
        )

    def reveal(
        self, row: int, col: int, confirm: bool = False
    ) -> ActionResult:
        """Reveal the cell at (row, col)."""
        return self.apply(row, col, Action.REVEAL, confirm)

    def toggle_flag(self, row: int, col: int) -> ActionResult:
        """Flag or unflag the cell at (row, col)."""
        return self.apply(row, col, Action.TOGGLE_FLAG)

    # ========================================================================
    # Win Condition
    # ========================================================================

    def check_win(self) -> bool:
        """
        Check whether every safe cell is revealed and every mine hidden.

        Flags are not considered.
        """
        for cell in self.board:
            if isinstance(cell, Revealed) and not cell.has_mine:
                continue
            if isinstance(cell, Hidden) and cell.has_mine:
                continue
            return False
        return True

    def _set_phase(self, phase: Phase) -> None:
        logger.info("Game %s on turn %d", phase.name.lower(), self.turn)
        self._phase = phase

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_playing(self) -> bool:
        return self._phase is Phase.PLAYING

    @property
    def is_won(self) -> bool:
        return self._phase is Phase.WON

    @property
    def is_lost(self) -> bool:
        return self._phase is Phase.LOST

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def mines_remaining(self) -> int:
        return self.board.mines_remaining

    @property
    def turn(self) -> int:
        return self.board.turn

    @property
    def selected(self) -> Optional[int]:
        """Index targeted by the most recent action, if any."""
        return self._selected

    @property
    def detonated(self) -> Optional[int]:
        """Index of the mine that lost the game, if any."""
        return self._detonated

    # ========================================================================
    # Rendering Queries
    # ========================================================================

    def cell_view(self, row: int, col: int) -> CellView:
        """Get the glyph kind for the cell at (row, col)."""
        return self.board.cell(self.board.index_of(row, col)).view

    def hint_at(self, row: int, col: int) -> Optional[int]:
        """Get the number shown on a revealed safe cell, else None."""
        cell = self.board.cell(self.board.index_of(row, col))
        if isinstance(cell, Revealed):
            return cell.hint
        return None

    def get_observation(self) -> np.ndarray:
        """Get the visible board as an int8 array (see Board)."""
        return self.board.get_observation()

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be acted on.

        Returns:
            (row, col) of every hidden cell, flagged ones included.
        """
        return [
            self.board.position_of(index)
            for index, cell in enumerate(self.board)
            if isinstance(cell, Hidden)
        ]
