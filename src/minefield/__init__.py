"""
Mine-clearing puzzle engine.

Provides the board model, mine placement, hint computation, cascading
reveal and the game state machine.
"""
from .cell import Cell, CellView, Hidden, Revealed
from .board import (
    Board,
    BoardConfig,
    DIFFICULTIES,
    EASY,
    MEDIUM,
    HARD,
    get_difficulty,
)
from .errors import (
    ConfigurationError,
    FlaggedCellError,
    InvalidPhaseError,
    InvalidSelectionError,
    MinefieldError,
    PlacementError,
)
from .placement import place_mines, place_mines_at, shuffled_indices
from .adjacency import hint, neighbors
from .reveal import Action, Outcome, apply_action
from .game import ActionResult, Game, Phase

__all__ = [
    "Cell",
    "CellView",
    "Hidden",
    "Revealed",
    "Board",
    "BoardConfig",
    "DIFFICULTIES",
    "EASY",
    "MEDIUM",
    "HARD",
    "get_difficulty",
    "ConfigurationError",
    "FlaggedCellError",
    "InvalidPhaseError",
    "InvalidSelectionError",
    "MinefieldError",
    "PlacementError",
    "place_mines",
    "place_mines_at",
    "shuffled_indices",
    "hint",
    "neighbors",
    "Action",
    "Outcome",
    "apply_action",
    "ActionResult",
    "Game",
    "Phase",
]
